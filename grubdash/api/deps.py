"""
GrubDash — Request dependencies

Repositories and the ID generator live on `app.state` (one set per app);
routes receive them, and any record resolved from the path, as explicit
dependency values.
"""
from typing import Any

from fastapi import Depends, Request

from grubdash.core.errors import NotFoundError
from grubdash.core.ids import IdGenerator
from grubdash.db.repository import Repository
from grubdash.schemas.common import RequestBody
from grubdash.schemas.dish import Dish
from grubdash.schemas.order import Order


def get_dish_repository(request: Request) -> Repository[Dish]:
    return request.app.state.dishes


def get_order_repository(request: Request) -> Repository[Order]:
    return request.app.state.orders


def get_id_generator(request: Request) -> IdGenerator:
    return request.app.state.id_generator


def request_data(payload: RequestBody | None = None) -> dict[str, Any]:
    """The `data` object of the request body; `{}` when absent."""
    return payload.data if payload is not None else {}


def find_dish(dishId: str, dishes: Repository[Dish] = Depends(get_dish_repository)) -> Dish:
    dish = dishes.find(dishId)
    if dish is None:
        raise NotFoundError(f"Dish id not found: {dishId}")
    return dish


def find_order(orderId: str, orders: Repository[Order] = Depends(get_order_repository)) -> Order:
    order = orders.find(orderId)
    if order is None:
        raise NotFoundError(f"Order id not found: {orderId}")
    return order
