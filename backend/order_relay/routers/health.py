import time

from fastapi import APIRouter

from ..schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """
    Very simple health check endpoint.

    `ts` is the server time in epoch milliseconds.
    """
    return HealthResponse(ok=True, ts=int(time.time() * 1000))
