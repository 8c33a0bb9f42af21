"""
GrubDash — Dish schemas
"""
from pydantic import BaseModel, Field


class Dish(BaseModel):
    id: str
    name: str = Field(..., min_length=1, examples=["Dolcelatte and chickpea spaghetti"])
    description: str = Field(..., min_length=1)
    price: int = Field(..., gt=0, strict=True)
    image_url: str = Field(..., min_length=1)


class DishResponse(BaseModel):
    data: Dish


class DishListResponse(BaseModel):
    data: list[Dish]
