from typing import Any


class RelayError(Exception):
    """
    Base class for errors reported back to the caller.

    Every error is terminal for the request that raised it. Routers decide
    which envelope the caller sees: `{ok: false, msg}` for the config and
    token endpoints, `{code, msg}` for grab-order.
    """

    status_code: int = 400

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def ok_payload(self) -> dict[str, Any]:
        return {"ok": False, "msg": self.msg}

    def code_payload(self) -> dict[str, Any]:
        return {"code": self.status_code, "msg": self.msg}


class ValidationError(RelayError):
    """Missing or malformed caller input."""

    status_code = 400


class NotFoundError(RelayError):
    status_code = 404


class UpstreamError(RelayError):
    """
    The order endpoint could not be reached or answered with an error.

    `error` holds the upstream's error payload when it sent one, otherwise
    the description of the transport failure.
    """

    status_code = 502

    def __init__(self, error: Any, msg: str = "Upstream request failed") -> None:
        super().__init__(msg)
        self.error = error

    def code_payload(self) -> dict[str, Any]:
        payload = super().code_payload()
        payload["error"] = self.error
        return payload
