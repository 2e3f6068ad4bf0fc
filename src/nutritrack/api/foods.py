"""Food search and portion endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from nutritrack.api.schemas import ScaleFoodIn
from nutritrack.domain.foods import FoodItem
from nutritrack.services.foods import scale_food_item

if TYPE_CHECKING:
    from nutritrack.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("/search")
async def search_foods(
    request: Request,
    q: str = Query(default=""),
    limit: int = Query(default=10, ge=1, le=50),
) -> list[FoodItem]:
    """Search foods, local dataset first."""
    container: AppContainer = request.app.state.container
    return await container.food_search_service.search(q, limit=limit)


@router.get("/nutrition")
async def food_nutrition(request: Request, name: str) -> FoodItem:
    """Return nutrition facts for a single food."""
    container: AppContainer = request.app.state.container
    food = await container.food_search_service.get_nutrition(name)
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return food


@router.post("/scale")
async def scale_food(payload: ScaleFoodIn) -> FoodItem:
    """Scale a food's serving and nutrients by a quantity."""
    return scale_food_item(payload.food, payload.quantity)
