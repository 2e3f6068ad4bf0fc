"""Tests for meal aggregation and the meal service."""

from datetime import date
from uuid import uuid4

import pytest

from nutritrack.data.common_foods import COMMON_FOODS
from nutritrack.domain.profile import Profile
from nutritrack.services.meals import (
    MealNotFoundError,
    MealService,
    aggregate_day,
    build_meal_from_foods,
    compose_meal_name,
    consumed_percentage,
    month_days,
    sort_meals,
)
from nutritrack.services.profiles import ProfileService
from tests.conftest import InMemoryMealRepository, make_meal

DAY = date(2024, 3, 15)


def _food(name: str):  # type: ignore[no-untyped-def]
    return next(food for food in COMMON_FOODS if food.food_name == name)


def test_aggregate_day_partitions_consumed_and_planned() -> None:
    meals = [
        make_meal(DAY, 400, proteins=20, carbs=50, fats=10, completed=True),
        make_meal(DAY, 700, proteins=35, carbs=60, fats=25),
        make_meal(DAY, 300, proteins=5, carbs=40, fats=8, completed=True),
    ]

    aggregate = aggregate_day(meals, 2000)

    assert aggregate.consumed == 700
    assert aggregate.planned == 700
    assert aggregate.consumed + aggregate.planned == sum(m.calories for m in meals)
    assert aggregate.balance == 600
    assert aggregate.remaining == 600
    assert not aggregate.is_over_goal
    assert aggregate.consumed_macros.protein == 25
    assert aggregate.total_macros.carbs == 150


def test_aggregate_day_over_goal_clamps_remaining() -> None:
    meals = [make_meal(DAY, 1500, completed=True), make_meal(DAY, 800)]

    aggregate = aggregate_day(meals, 2000)

    assert aggregate.balance == -300
    assert aggregate.remaining == 0
    assert aggregate.is_over_goal


def test_aggregate_day_is_idempotent_and_handles_empty() -> None:
    meals = [make_meal(DAY, 250, completed=True)]

    assert aggregate_day(meals, 1800) == aggregate_day(meals, 1800)
    empty = aggregate_day([], 1800)
    assert (empty.consumed, empty.planned, empty.remaining) == (0, 0, 1800)


def test_consumed_percentage_caps_at_one_hundred() -> None:
    quarter = aggregate_day([make_meal(DAY, 500, completed=True)], 2000)
    over = aggregate_day([make_meal(DAY, 2500, completed=True)], 2000)

    assert consumed_percentage(quarter) == 25
    assert consumed_percentage(over) == 100


def test_sort_meals_by_meal_type_with_unknown_last() -> None:
    meals = [
        make_meal(DAY, 1, name="s", meal_type="snack"),
        make_meal(DAY, 1, name="x", meal_type="brunch"),
        make_meal(DAY, 1, name="d", meal_type="dinner"),
        make_meal(DAY, 1, name="b", meal_type="breakfast"),
        make_meal(DAY, 1, name="l", meal_type="lunch"),
    ]

    assert [meal.name for meal in sort_meals(meals)] == ["b", "l", "d", "s", "x"]


def test_compose_meal_name_truncates_long_names() -> None:
    assert compose_meal_name(["Oeuf", "Pain"]) == "Oeuf, Pain"
    long_name = compose_meal_name(["Galette de blé complet"] * 4)
    assert len(long_name) == 60
    assert long_name.endswith("...")


def test_build_meal_from_foods_sums_scaled_items() -> None:
    meal = build_meal_from_foods(
        [(_food("Oeuf"), 2), (_food("Pain"), 1)], meal_type="breakfast", day=DAY
    )

    assert meal.name == "Oeuf, Pain"
    assert meal.calories == 215
    assert meal.proteins == 14.0
    assert meal.carbs == 16.0
    assert meal.fats == 11.0
    assert not meal.completed
    assert meal.id is None


def test_create_meal_from_foods_requires_selection(meal_service: MealService) -> None:
    with pytest.raises(ValueError):
        meal_service.create_meal_from_foods(uuid4(), [], "lunch", DAY)


def test_day_overview_uses_profile_goal(
    meal_service: MealService, profile_service: ProfileService
) -> None:
    user_id = uuid4()
    profile_service.register(
        user_id,
        Profile(
            age=30,
            weight=80,
            height=180,
            gender="male",
            activity_level="moderate",
            fitness_goal="maintenance",
        ),
    )
    meal_service.create_meal(user_id, make_meal(DAY, 600, meal_type="dinner"))
    meal_service.create_meal(
        user_id, make_meal(DAY, 400, meal_type="breakfast", completed=True)
    )

    meals, aggregate, goals = meal_service.get_day_overview(user_id, DAY)

    assert [meal.meal_type for meal in meals] == ["breakfast", "dinner"]
    assert aggregate.daily_goal == 2873
    assert aggregate.remaining == 1873
    assert goals.daily_protein_goal == 160


def test_toggle_and_set_completed(meal_service: MealService) -> None:
    user_id = uuid4()
    meal = meal_service.create_meal(user_id, make_meal(DAY, 300))

    toggled = meal_service.toggle_completed(user_id, meal.id)
    assert toggled.completed
    assert meal_service.list_day(user_id, DAY)[0].completed

    reset = meal_service.set_completed(user_id, meal.id, False)
    assert not reset.completed


def test_unknown_meal_raises(meal_service: MealService) -> None:
    with pytest.raises(MealNotFoundError):
        meal_service.toggle_completed(uuid4(), uuid4())
    with pytest.raises(MealNotFoundError):
        meal_service.delete_meal(uuid4(), uuid4())


def test_meals_are_scoped_to_owner(
    meal_service: MealService, meal_repository: InMemoryMealRepository
) -> None:
    owner = uuid4()
    meal = meal_service.create_meal(owner, make_meal(DAY, 300))

    with pytest.raises(MealNotFoundError):
        meal_service.delete_meal(uuid4(), meal.id)
    meal_service.delete_meal(owner, meal.id)
    assert meal_repository.meals == {}


def test_month_days_handles_offsets_across_years() -> None:
    days = month_days(date(2024, 1, 31), month_offset=1)
    assert days[0] == date(2024, 2, 1)
    assert len(days) == 29

    previous = month_days(date(2024, 1, 10), month_offset=-1)
    assert previous[0] == date(2023, 12, 1)
    assert previous[-1] == date(2023, 12, 31)


def test_month_plan_keeps_empty_days(meal_service: MealService) -> None:
    user_id = uuid4()
    meal_service.create_meal(user_id, make_meal(date(2024, 3, 2), 500))
    meal_service.create_meal(user_id, make_meal(date(2024, 4, 1), 500))

    plan = meal_service.get_month_plan(user_id, date(2024, 3, 20))

    assert len(plan) == 31
    assert len(plan[1].meals) == 1
    assert all(not entry.meals for entry in plan if entry.day != date(2024, 3, 2))
