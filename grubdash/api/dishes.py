"""
GrubDash — Dishes API

  GET  /dishes            list every dish
  POST /dishes            create a dish
  GET  /dishes/{dishId}   read one dish
  PUT  /dishes/{dishId}   replace a dish's mutable fields
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, status

from grubdash.api.deps import find_dish, get_dish_repository, get_id_generator, request_data
from grubdash.core.ids import IdGenerator
from grubdash.core.validation import ResourceRules, build_record
from grubdash.db.repository import Repository
from grubdash.schemas.dish import Dish, DishListResponse, DishResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/dishes", tags=["dishes"])

DISH_FIELDS = ("name", "description", "price", "image_url")

DISH_RULES = ResourceRules(
    resource="Dish",
    required=DISH_FIELDS,
    text=("name", "description", "image_url"),
    positive=("price",),
)


@router.get("", response_model=DishListResponse)
async def list_dishes(dishes: Repository[Dish] = Depends(get_dish_repository)):
    return {"data": dishes.list()}


@router.post("", response_model=DishResponse, status_code=status.HTTP_201_CREATED)
async def create_dish(
    data: dict[str, Any] = Depends(request_data),
    dishes: Repository[Dish] = Depends(get_dish_repository),
    next_id: IdGenerator = Depends(get_id_generator),
):
    DISH_RULES.validate(data)
    dish = build_record("Dish", Dish, id=next_id(), **{f: data[f] for f in DISH_FIELDS})
    dishes.insert(dish)
    logger.info("Created dish %s (%s)", dish.id, dish.name)
    return {"data": dish}


@router.get("/{dishId}", response_model=DishResponse)
async def read_dish(dish: Dish = Depends(find_dish)):
    return {"data": dish}


@router.put("/{dishId}", response_model=DishResponse)
async def update_dish(
    dishId: str,
    dish: Dish = Depends(find_dish),
    data: dict[str, Any] = Depends(request_data),
    dishes: Repository[Dish] = Depends(get_dish_repository),
):
    DISH_RULES.validate(data)
    DISH_RULES.check_route_id(data, dishId)

    updated = build_record("Dish", Dish, id=dish.id, **{f: data[f] for f in DISH_FIELDS})
    dishes.update(updated)
    logger.info("Updated dish %s", updated.id)
    return {"data": updated}
