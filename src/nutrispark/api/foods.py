"""Foods API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from nutrispark.api.models import FoodResponse
from nutrispark.services.foods import FoodNotFoundError

if TYPE_CHECKING:
    from nutrispark.containers import AppContainer

router = APIRouter(prefix="/api/foods", tags=["foods"])


@router.get("/all")
async def list_foods(request: Request) -> list[FoodResponse]:
    """Return every known food."""
    container: AppContainer = request.app.state.container
    foods = container.food_catalog_service.list_foods()
    return [FoodResponse.from_food(food) for food in foods]


@router.get("/{slug}")
async def get_food(slug: str, request: Request) -> FoodResponse:
    """Return the full record for a food slug."""
    container: AppContainer = request.app.state.container
    try:
        food = container.food_catalog_service.get_food(slug)
    except FoodNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Food not found"
        ) from exc
    return FoodResponse.from_food(food)
