from fastapi import APIRouter

from .health import router as health_router
from .client_config import router as client_config_router
from .grab_order import GRAB_ORDER_ROUTE, router as grab_order_router
from .ws_token import router as ws_token_router

API_PREFIX = "/api"
GRAB_ORDER_PATH = API_PREFIX + GRAB_ORDER_ROUTE

api_router = APIRouter(prefix=API_PREFIX)

# Mount all sub-routers here. This keeps main.py clean.
api_router.include_router(health_router)
api_router.include_router(client_config_router)
api_router.include_router(grab_order_router)
api_router.include_router(ws_token_router)
