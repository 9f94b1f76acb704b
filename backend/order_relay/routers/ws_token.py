from fastapi import APIRouter

from ..schemas import OkResponse, WsTokenResponse, WsTokenSave
from ..state import StateDep

router = APIRouter(tags=["ws-token"])


@router.get("/get-ws-token", response_model=WsTokenResponse)
def get_ws_token(state: StateDep) -> WsTokenResponse:
    return WsTokenResponse(wsToken=state.ws_token.get())


@router.post("/save-ws-token", response_model=OkResponse)
def save_ws_token(state: StateDep, payload: WsTokenSave | None = None) -> OkResponse:
    """
    Overwrite the shared WebSocket token.

    There is no authentication: whoever saves last wins, for every client.
    """
    payload = payload or WsTokenSave()
    state.ws_token.set(payload.wsToken)
    return OkResponse()
