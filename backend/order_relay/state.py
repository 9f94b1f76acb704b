from dataclasses import dataclass
from typing import Annotated

import requests
from fastapi import Depends, Request

from .config import Settings
from .services.config_store import ConfigStore
from .services.grab_order_client import GrabOrderClient
from .services.ws_token import WsTokenHolder


@dataclass
class RelayState:
    """
    Everything the relay keeps in memory for the lifetime of the process.

    Built once by `create_app` and stored on `app.state.relay`; handlers get
    it through the `StateDep` dependency.
    """

    settings: Settings
    configs: ConfigStore
    ws_token: WsTokenHolder
    grab_client: GrabOrderClient


def build_state(settings: Settings, session: requests.Session | None = None) -> RelayState:
    return RelayState(
        settings=settings,
        configs=ConfigStore(),
        ws_token=WsTokenHolder(settings.WS_TOKEN),
        grab_client=GrabOrderClient(
            settings.UPSTREAM_GRAB_URL,
            timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
            verify_tls=settings.UPSTREAM_VERIFY_TLS,
            pool_maxsize=settings.UPSTREAM_POOL_MAXSIZE,
            session=session,
        ),
    )


def get_state(request: Request) -> RelayState:
    """FastAPI dependency that provides the process-wide RelayState."""
    return request.app.state.relay


StateDep = Annotated[RelayState, Depends(get_state)]
