from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..errors import RelayError, ValidationError
from ..schemas import GrabOrderRequest
from ..state import StateDep

GRAB_ORDER_ROUTE = "/grab-order"

router = APIRouter(tags=["grab-order"])


@router.post(GRAB_ORDER_ROUTE)
def grab_order(state: StateDep, payload: GrabOrderRequest | None = None) -> JSONResponse:
    """
    Sign and forward an order grab on behalf of a registered client.

    On success the upstream JSON body is returned untouched. Errors use the
    `{code, msg}` envelope (plus `error` for upstream failures).
    """
    payload = payload or GrabOrderRequest()
    try:
        if not payload.orderId:
            raise ValidationError("orderId is required")
        if not isinstance(payload.orderId, (str, int, float)):
            raise ValidationError("orderId must be a string or number")
        if not payload.clientId:
            raise ValidationError("clientId is required")

        conf = state.configs.find(payload.clientId)
        if conf is None:
            raise ValidationError("Config not set for this clientId")

        data = state.grab_client.grab(conf, payload.orderId)
    except RelayError as exc:
        return JSONResponse(status_code=exc.status_code, content=exc.code_payload())

    return JSONResponse(content=data)
