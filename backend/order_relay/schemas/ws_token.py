from typing import Any

from pydantic import BaseModel


class WsTokenSave(BaseModel):
    wsToken: Any = None


class WsTokenResponse(BaseModel):
    ok: bool = True
    wsToken: str
