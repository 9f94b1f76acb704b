import logging
import secrets
import threading
from typing import Any

from ..errors import ValidationError

logger = logging.getLogger(__name__)

WS_TOKEN_PREFIX = "ws_"


def generate_ws_token() -> str:
    return WS_TOKEN_PREFIX + secrets.token_hex(16)


class WsTokenHolder:
    """
    The single WebSocket token shared by every client of this process.

    Anyone can overwrite it; there is no history and no ownership check.
    """

    def __init__(self, initial: str | None = None) -> None:
        self._token = initial or generate_ws_token()
        self._lock = threading.Lock()

    def get(self) -> str:
        with self._lock:
            return self._token

    def set(self, token: Any) -> str:
        if not token or not isinstance(token, str):
            raise ValidationError("wsToken must be a string")
        with self._lock:
            self._token = token
        logger.info("WebSocket token updated: %s", token)
        return token
