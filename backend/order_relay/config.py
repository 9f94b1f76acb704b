from pydantic_settings import BaseSettings


DEFAULT_UPSTREAM_GRAB_URL = "https://hongniu.fengbaikeji.com/api/order/putOrderByDs"


class Settings(BaseSettings):
    """
    Application configuration.

    Every field can be overridden through the environment (or a `.env` file
    next to the process), e.g. `PORT=8080 WS_TOKEN=abc order-relay`.
    """

    PORT: int = 3001
    HOST: str = "0.0.0.0"

    # Initial shared WebSocket token. Empty / unset -> a random "ws_..." token.
    WS_TOKEN: str | None = None

    # Upstream order endpoint. The upstream's certificate is not verified
    # unless UPSTREAM_VERIFY_TLS is turned on.
    UPSTREAM_GRAB_URL: str = DEFAULT_UPSTREAM_GRAB_URL
    UPSTREAM_TIMEOUT_SECONDS: float = 10.0
    UPSTREAM_VERIFY_TLS: bool = False
    UPSTREAM_POOL_MAXSIZE: int = 64

    CORS_ORIGINS: list[str] = ["*"]

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
