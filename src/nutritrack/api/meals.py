"""Meal, dashboard and statistics endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from nutritrack.api.deps import current_user_id, get_container, resolve_day
from nutritrack.api.schemas import (
    DailyAveragesOut,
    DailyCaloriesOut,
    DashboardOut,
    DayPlanOut,
    GoalsOut,
    MacrosOut,
    MealFromFoodsIn,
    MealIn,
    MealOut,
    MealStatusIn,
    PeriodStatsOut,
)
from nutritrack.domain.meals import Meal
from nutritrack.services.meals import MealNotFoundError, consumed_percentage
from nutritrack.services.stats import PERIOD_RANGES

if TYPE_CHECKING:
    from nutritrack.containers import AppContainer

router = APIRouter(tags=["meals"])

MAX_MONTH_OFFSET = 1200


@router.get("/dashboard")
async def dashboard(
    request: Request,
    day: date | None = None,
    user_id: UUID = Depends(current_user_id),
) -> DashboardOut:
    """Return the day's meals with consumed, planned and remaining calories."""
    container: AppContainer = get_container(request)
    resolved_day = resolve_day(container, day)
    meals, aggregate, goals = container.meal_service.get_day_overview(
        user_id, resolved_day
    )
    return DashboardOut(
        date=resolved_day,
        goals=GoalsOut.model_validate(goals),
        consumed=aggregate.consumed,
        planned=aggregate.planned,
        remaining=aggregate.remaining,
        balance=aggregate.balance,
        is_over_goal=aggregate.is_over_goal,
        consumed_percentage=consumed_percentage(aggregate),
        consumed_macros=MacrosOut.model_validate(aggregate.consumed_macros),
        total_macros=MacrosOut.model_validate(aggregate.total_macros),
        meals=[MealOut.model_validate(meal) for meal in meals],
    )


@router.get("/meals")
async def list_meals(
    request: Request,
    day: date | None = None,
    user_id: UUID = Depends(current_user_id),
) -> list[MealOut]:
    """Return a day's meals ordered by meal type."""
    container: AppContainer = get_container(request)
    meals = container.meal_service.list_day(user_id, resolve_day(container, day))
    return [MealOut.model_validate(meal) for meal in meals]


@router.post("/meals", status_code=status.HTTP_201_CREATED)
async def create_meal(
    payload: MealIn, request: Request, user_id: UUID = Depends(current_user_id)
) -> MealOut:
    """Log a directly entered meal."""
    container: AppContainer = get_container(request)
    meal = container.meal_service.create_meal(
        user_id, Meal(id=None, **payload.model_dump())
    )
    return MealOut.model_validate(meal)


@router.post("/meals/from-foods", status_code=status.HTTP_201_CREATED)
async def create_meal_from_foods(
    payload: MealFromFoodsIn,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> MealOut:
    """Log a planned meal composed of foods and quantities."""
    container: AppContainer = get_container(request)
    meal = container.meal_service.create_meal_from_foods(
        user_id,
        [(selection.food, selection.quantity) for selection in payload.foods],
        meal_type=payload.meal_type,
        day=payload.date,
    )
    return MealOut.model_validate(meal)


@router.get("/meals/plan")
async def month_plan(
    request: Request,
    month_offset: int = Query(default=0, ge=-MAX_MONTH_OFFSET, le=MAX_MONTH_OFFSET),
    user_id: UUID = Depends(current_user_id),
) -> list[DayPlanOut]:
    """Return every day of a month with its meals."""
    container: AppContainer = get_container(request)
    plan = container.meal_service.get_month_plan(
        user_id, resolve_day(container, None), month_offset
    )
    return [
        DayPlanOut(
            date=entry.day,
            meals=[MealOut.model_validate(meal) for meal in entry.meals],
        )
        for entry in plan
    ]


@router.patch("/meals/{meal_id}")
async def update_meal_status(
    meal_id: UUID,
    payload: MealStatusIn,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> MealOut:
    """Mark a meal consumed or planned."""
    container: AppContainer = get_container(request)
    try:
        if payload.completed is None:
            meal = container.meal_service.toggle_completed(user_id, meal_id)
        else:
            meal = container.meal_service.set_completed(
                user_id, meal_id, payload.completed
            )
    except MealNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from None
    return MealOut.model_validate(meal)


@router.delete("/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
    meal_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> Response:
    """Remove a meal."""
    container: AppContainer = get_container(request)
    try:
        container.meal_service.delete_meal(user_id, meal_id)
    except MealNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/stats")
async def period_stats(
    request: Request,
    range_name: str = Query(default="week", alias="range"),
    dense: bool = False,
    user_id: UUID = Depends(current_user_id),
) -> PeriodStatsOut:
    """Return averages and the calorie trend for a period ending today."""
    container: AppContainer = get_container(request)
    if range_name not in PERIOD_RANGES:
        range_name = "week"
    stats, goal = container.stats_service.get_period(
        user_id, range_name, resolve_day(container, None), dense=dense
    )
    return PeriodStatsOut(
        range=range_name,
        start=stats.start,
        end=stats.end,
        daily_calories_goal=goal,
        daily_averages=DailyAveragesOut.model_validate(stats.daily_averages),
        series=[
            DailyCaloriesOut(date=point.day, calories=point.calories)
            for point in stats.series
        ],
        meal_type_counts=stats.meal_type_counts,
        day_count=stats.day_count,
    )
