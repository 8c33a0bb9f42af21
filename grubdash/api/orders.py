"""
GrubDash — Orders API

Status lifecycle: pending → preparing → out-for-delivery → delivered.
Updates may hold or advance the status, never move it back; delivered
orders are frozen and only pending orders can be deleted.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, Response, status

from grubdash.api.deps import find_order, get_id_generator, get_order_repository, request_data
from grubdash.core.errors import ConflictError
from grubdash.core.ids import IdGenerator
from grubdash.core.validation import ResourceRules, build_record
from grubdash.db.repository import Repository
from grubdash.schemas.order import Order, OrderListResponse, OrderResponse, OrderStatus

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])

ORDER_RULES = ResourceRules(
    resource="Order",
    required=("deliverTo", "mobileNumber"),
    text=("deliverTo", "mobileNumber"),
    collection="dishes",
    collection_item="Dish",
)
ORDER_UPDATE_RULES = ORDER_RULES.with_enum("status", tuple(s.value for s in OrderStatus))


@router.get("", response_model=OrderListResponse)
async def list_orders(orders: Repository[Order] = Depends(get_order_repository)):
    return {"data": orders.list()}


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    data: dict[str, Any] = Depends(request_data),
    orders: Repository[Order] = Depends(get_order_repository),
    next_id: IdGenerator = Depends(get_id_generator),
):
    ORDER_RULES.validate(data)
    order = build_record(
        "Order",
        Order,
        id=next_id(),
        deliverTo=data["deliverTo"],
        mobileNumber=data["mobileNumber"],
        status=OrderStatus.PENDING,
        dishes=data["dishes"],
    )
    orders.insert(order)
    logger.info("Created order %s with %d dish line(s)", order.id, len(order.dishes))
    return {"data": order}


@router.get("/{orderId}", response_model=OrderResponse)
async def read_order(order: Order = Depends(find_order)):
    return {"data": order}


@router.put("/{orderId}", response_model=OrderResponse)
async def update_order(
    orderId: str,
    order: Order = Depends(find_order),
    data: dict[str, Any] = Depends(request_data),
    orders: Repository[Order] = Depends(get_order_repository),
):
    ORDER_UPDATE_RULES.validate(data)
    if order.status == OrderStatus.DELIVERED:
        raise ConflictError("A delivered order cannot be changed")
    ORDER_UPDATE_RULES.check_route_id(data, orderId)

    requested = OrderStatus(data["status"])
    if requested.rank < order.status.rank:
        raise ConflictError(
            f"Order status cannot move from {order.status.value} back to {requested.value}"
        )

    updated = build_record(
        "Order",
        Order,
        id=order.id,
        deliverTo=data["deliverTo"],
        mobileNumber=data["mobileNumber"],
        status=requested,
        dishes=data["dishes"],
    )
    orders.update(updated)
    if requested != order.status:
        logger.info("Order %s status %s -> %s", order.id, order.status.value, requested.value)
    return {"data": updated}


@router.delete("/{orderId}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
    order: Order = Depends(find_order),
    orders: Repository[Order] = Depends(get_order_repository),
):
    if order.status != OrderStatus.PENDING:
        raise ConflictError("An order cannot be deleted unless it is pending.")
    orders.remove(order.id)
    logger.info("Deleted order %s", order.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
