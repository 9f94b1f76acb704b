import logging

import requests
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, settings as default_settings
from .errors import RelayError, ValidationError
from .middleware import CollapseSlashesMiddleware
from .routers import GRAB_ORDER_PATH, api_router
from .state import build_state

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, session: requests.Session | None = None) -> FastAPI:
    """
    Build the relay application.

    The in-memory state (client configs, shared WebSocket token, upstream
    client) is created here, once per app, and attached to `app.state.relay`.
    `session` replaces the upstream HTTP session (used by the tests).
    """
    settings = settings or default_settings

    app = FastAPI(title="Order Relay")
    app.state.relay = build_state(settings, session=session)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it runs first, before CORS and routing see the path.
    app.add_middleware(CollapseSlashesMiddleware)

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
        logger.warning("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.msg)
        return JSONResponse(status_code=exc.status_code, content=exc.ok_payload())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("%s %s -> invalid request: %s", request.method, request.url.path, exc.errors())
        error = ValidationError("invalid request body")
        # grab-order answers with the {code, msg} envelope, everything else with {ok, msg}
        if request.url.path == GRAB_ORDER_PATH:
            return JSONResponse(status_code=error.status_code, content=error.code_payload())
        return JSONResponse(status_code=error.status_code, content=error.ok_payload())

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("%s %s -> unhandled error", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"ok": False, "msg": "Internal Server Error"})

    @app.on_event("startup")
    async def log_startup() -> None:
        uvicorn_logger = logging.getLogger("uvicorn")
        uvicorn_logger.info("API server listening on http://localhost:%s", settings.PORT)
        uvicorn_logger.info("Current WebSocket token: %s", app.state.relay.ws_token.get())
        uvicorn_logger.info("--- Registered Routes ---")
        for route in app.router.routes:
            uvicorn_logger.info(
                "PATH: %s METHODS: %s", getattr(route, "path", None), getattr(route, "methods", None)
            )
        uvicorn_logger.info("-------------------------")

    app.include_router(api_router)
    return app


app = create_app()
