"""
GrubDash — Order schemas
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"

    @property
    def rank(self) -> int:
        return list(OrderStatus).index(self)


class OrderLine(BaseModel):
    """A dish reference with a quantity; dish snapshot fields are kept as sent."""

    model_config = ConfigDict(extra="allow")

    dishId: str | None = None
    quantity: int = Field(..., gt=0, strict=True)


class Order(BaseModel):
    id: str
    deliverTo: str = Field(..., min_length=1, examples=["308 Negra Arroyo Lane, Albuquerque, NM"])
    mobileNumber: str = Field(..., min_length=1, examples=["(505) 143-3369"])
    status: OrderStatus = OrderStatus.PENDING
    dishes: list[OrderLine] = Field(..., min_length=1)


class OrderResponse(BaseModel):
    data: Order


class OrderListResponse(BaseModel):
    data: list[Order]
