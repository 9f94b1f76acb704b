from typing import Any

from pydantic import BaseModel, Field


class GrabOrderRequest(BaseModel):
    """
    Body of `POST /api/grab-order`.

    orderId keeps its JSON type (string or number) because it is forwarded
    to the upstream unchanged.
    """

    clientId: Any = Field(None, description="租户标识")
    orderId: Any = Field(None, description="要抢的订单 id")
