from typing import Any

from pydantic import BaseModel, Field


class ClientConfig(BaseModel):
    """
    Upstream credentials of one tenant.

    `key` signs requests, `version` and `token` are sent as the `Version`
    and `X-Auth-Token` headers.
    """

    client_id: str
    key: str
    version: str
    token: str


class ConfigWrite(BaseModel):
    """
    Body of `POST /api/config`.

    Fields are deliberately untyped: the config store validates them so that
    callers get `{ok: false, msg}` instead of a pydantic 422.
    """

    clientId: Any = Field(None, description="租户标识")
    key: Any = Field(None, description="签名 key")
    version: Any = Field(None, description="上游 Version 头")
    token: Any = Field(None, description="上游 X-Auth-Token 头")


class ClientConfigOut(BaseModel):
    key: str
    version: str
    token: str


class ConfigReadResponse(BaseModel):
    ok: bool = True
    config: ClientConfigOut
