"""
Pydantic models (schemas) used for request / response payloads.
"""

from .client_config import ClientConfig, ClientConfigOut, ConfigWrite, ConfigReadResponse
from .grab_order import GrabOrderRequest
from .ws_token import WsTokenResponse, WsTokenSave
from .common import OkResponse, HealthResponse

__all__ = [
    "ClientConfig",
    "ClientConfigOut",
    "ConfigWrite",
    "ConfigReadResponse",
    "GrabOrderRequest",
    "WsTokenResponse",
    "WsTokenSave",
    "OkResponse",
    "HealthResponse",
]
