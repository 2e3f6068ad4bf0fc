"""Meal logging and daily aggregation."""

import calendar
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID

from nutritrack.domain.foods import FoodItem
from nutritrack.domain.meals import DayAggregate, DayMeals, MacroTotals, Meal
from nutritrack.domain.profile import NutritionGoals
from nutritrack.rounding import round_half_up, round_half_up_int
from nutritrack.services.foods import scale_food_item
from nutritrack.services.profiles import ProfileService

MEAL_TYPE_RANK = {"breakfast": 1, "lunch": 2, "dinner": 3, "snack": 4}
_UNKNOWN_RANK = 999
MAX_MEAL_NAME_LENGTH = 60


class MealNotFoundError(LookupError):
    """Raised when a meal id does not exist for the user."""


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def create_meal(self, user_id: UUID, meal: Meal) -> Meal:
        """Persist a meal and return it with its id."""

    def get_meal(self, user_id: UUID, meal_id: UUID) -> Meal | None:
        """Return a meal by id."""

    def list_meals(self, user_id: UUID, start: date, end: date) -> list[Meal]:
        """Return meals dated between start and end inclusive."""

    def set_completed(self, user_id: UUID, meal_id: UUID, completed: bool) -> None:
        """Update the completed flag of a meal."""

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        """Remove a meal."""


def aggregate_day(meals: Iterable[Meal], daily_goal: int) -> DayAggregate:
    """Split a day's calories into consumed and planned and sum macros."""
    consumed = 0
    planned = 0
    consumed_macros = [0.0, 0.0, 0.0]
    total_macros = [0.0, 0.0, 0.0]
    for meal in meals:
        macros = (meal.proteins, meal.carbs, meal.fats)
        if meal.completed:
            consumed += meal.calories
            consumed_macros = [a + b for a, b in zip(consumed_macros, macros)]
        else:
            planned += meal.calories
        total_macros = [a + b for a, b in zip(total_macros, macros)]
    return DayAggregate(
        daily_goal=daily_goal,
        consumed=consumed,
        planned=planned,
        consumed_macros=MacroTotals(*consumed_macros),
        total_macros=MacroTotals(*total_macros),
    )


def consumed_percentage(aggregate: DayAggregate) -> int:
    """Share of the goal already eaten, capped at 100."""
    if aggregate.daily_goal <= 0:
        return 0
    percentage = round_half_up_int(aggregate.consumed / aggregate.daily_goal * 100)
    return min(percentage, 100)


def sort_meals(meals: Iterable[Meal]) -> list[Meal]:
    """Order meals breakfast, lunch, dinner, snack; unknown types last."""
    return sorted(
        meals, key=lambda meal: MEAL_TYPE_RANK.get(meal.meal_type, _UNKNOWN_RANK)
    )


def compose_meal_name(names: Sequence[str]) -> str:
    """Join food names into a meal name of bounded length."""
    name = ", ".join(names)
    if len(name) > MAX_MEAL_NAME_LENGTH:
        return name[: MAX_MEAL_NAME_LENGTH - 3] + "..."
    return name


def build_meal_from_foods(
    selections: Sequence[tuple[FoodItem, float]], meal_type: str, day: date
) -> Meal:
    """Build a planned meal from foods and their quantities."""
    scaled = [scale_food_item(food, quantity) for food, quantity in selections]
    return Meal(
        id=None,
        name=compose_meal_name([food.food_name for food in scaled]),
        meal_type=meal_type,
        date=day,
        calories=round_half_up_int(sum(food.nf_calories for food in scaled)),
        proteins=round_half_up(sum(food.nf_protein for food in scaled), 1),
        carbs=round_half_up(sum(food.nf_total_carbohydrate for food in scaled), 1),
        fats=round_half_up(sum(food.nf_total_fat for food in scaled), 1),
        completed=False,
    )


def month_days(today: date, month_offset: int = 0) -> list[date]:
    """Return every day of the month ``month_offset`` months from today."""
    month_index = today.year * 12 + (today.month - 1) + month_offset
    year, month = divmod(month_index, 12)
    month += 1
    days_in_month = calendar.monthrange(year, month)[1]
    first = date(year, month, 1)
    return [first + timedelta(days=offset) for offset in range(days_in_month)]


def group_meals_by_day(meals: Iterable[Meal], days: Sequence[date]) -> list[DayMeals]:
    """Group meals onto the given days, keeping days without meals."""
    by_day: dict[date, list[Meal]] = {day: [] for day in days}
    for meal in meals:
        if meal.date in by_day:
            by_day[meal.date].append(meal)
    return [DayMeals(day=day, meals=sort_meals(by_day[day])) for day in days]


@dataclass
class MealService:
    """Service for logging meals and reading daily overviews."""

    repository: MealRepository
    profile_service: ProfileService

    def list_day(self, user_id: UUID, day: date) -> list[Meal]:
        """Return a day's meals in meal-type order."""
        return sort_meals(self.repository.list_meals(user_id, day, day))

    def get_day_overview(
        self, user_id: UUID, day: date
    ) -> tuple[list[Meal], DayAggregate, NutritionGoals]:
        """Return a day's meals, their totals and the goals used."""
        meals = self.list_day(user_id, day)
        goals = self.profile_service.get_goals(user_id)
        return meals, aggregate_day(meals, goals.daily_calories_goal), goals

    def create_meal(self, user_id: UUID, meal: Meal) -> Meal:
        """Persist a directly entered meal."""
        return self.repository.create_meal(user_id, replace(meal, id=None))

    def create_meal_from_foods(
        self,
        user_id: UUID,
        selections: Sequence[tuple[FoodItem, float]],
        meal_type: str,
        day: date,
    ) -> Meal:
        """Persist a planned meal composed of scaled foods."""
        if not selections:
            raise ValueError("at least one food is required")
        meal = build_meal_from_foods(selections, meal_type, day)
        return self.repository.create_meal(user_id, meal)

    def set_completed(self, user_id: UUID, meal_id: UUID, completed: bool) -> Meal:
        """Mark a meal as consumed or planned."""
        meal = self._require_meal(user_id, meal_id)
        self.repository.set_completed(user_id, meal_id, completed)
        return replace(meal, completed=completed)

    def toggle_completed(self, user_id: UUID, meal_id: UUID) -> Meal:
        """Flip a meal between consumed and planned."""
        meal = self._require_meal(user_id, meal_id)
        return self.set_completed(user_id, meal_id, not meal.completed)

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        """Remove a meal."""
        self._require_meal(user_id, meal_id)
        self.repository.delete_meal(user_id, meal_id)

    def get_month_plan(
        self, user_id: UUID, today: date, month_offset: int = 0
    ) -> list[DayMeals]:
        """Return every day of a month with its meals."""
        days = month_days(today, month_offset)
        meals = self.repository.list_meals(user_id, days[0], days[-1])
        return group_meals_by_day(meals, days)

    def _require_meal(self, user_id: UUID, meal_id: UUID) -> Meal:
        meal = self.repository.get_meal(user_id, meal_id)
        if meal is None:
            raise MealNotFoundError(str(meal_id))
        return meal
