import re

from starlette.types import ASGIApp, Receive, Scope, Send

_SLASHES = re.compile(r"/{2,}")
_RAW_SLASHES = re.compile(rb"/{2,}")


class CollapseSlashesMiddleware:
    """
    Collapse runs of slashes in the request path before routing, so that
    `//api//config` reaches the same route as `/api/config`.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] in ("http", "websocket") and "//" in scope.get("path", ""):
            scope = dict(scope)
            scope["path"] = _SLASHES.sub("/", scope["path"])
            raw_path = scope.get("raw_path")
            if raw_path:
                scope["raw_path"] = _RAW_SLASHES.sub(b"/", raw_path)
        await self.app(scope, receive, send)
