from fastapi import APIRouter, Query

from ..schemas import ClientConfigOut, ConfigReadResponse, ConfigWrite, OkResponse
from ..state import StateDep

router = APIRouter(prefix="/config", tags=["config"])


@router.post("", response_model=OkResponse)
def save_config(state: StateDep, payload: ConfigWrite | None = None) -> OkResponse:
    """
    Create or replace the upstream credentials of one client.

    Validation errors are rendered as `{ok: false, msg}` by the app-level
    RelayError handler.
    """
    payload = payload or ConfigWrite()
    state.configs.set_config(payload.clientId, payload.key, payload.version, payload.token)
    return OkResponse()


@router.get("", response_model=ConfigReadResponse)
def read_config(
    state: StateDep,
    clientId: str | None = Query(None, description="Client whose config to return"),
) -> ConfigReadResponse:
    conf = state.configs.get_config(clientId)
    return ConfigReadResponse(
        config=ClientConfigOut(key=conf.key, version=conf.version, token=conf.token),
    )
