"""Period statistics over logged meals."""

import calendar
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from uuid import UUID
from zoneinfo import ZoneInfo

from nutritrack.domain.meals import Meal
from nutritrack.domain.stats import DailyAverages, DailyCalories, PeriodStats
from nutritrack.rounding import round_half_up_int
from nutritrack.services.meals import MealRepository
from nutritrack.services.profiles import ProfileService

PERIOD_RANGES = ("week", "month", "year")


def aggregate_period(
    meals: Iterable[Meal], start: date, end: date, dense: bool = False
) -> PeriodStats:
    """Average daily intake and per-day calories between start and end.

    Averages divide by the number of distinct days that have meals. The
    series is sparse unless ``dense`` asks for every calendar day.
    """
    in_range = [meal for meal in meals if start <= meal.date <= end]
    calories_by_day: dict[date, int] = {}
    protein = carbs = fat = 0.0
    for meal in in_range:
        calories_by_day[meal.date] = calories_by_day.get(meal.date, 0) + meal.calories
        protein += meal.proteins
        carbs += meal.carbs
        fat += meal.fats

    day_count = len(calories_by_day)
    if day_count:
        averages = DailyAverages(
            calories=round_half_up_int(sum(calories_by_day.values()) / day_count),
            protein=round_half_up_int(protein / day_count),
            carbs=round_half_up_int(carbs / day_count),
            fat=round_half_up_int(fat / day_count),
        )
    else:
        averages = DailyAverages(calories=0, protein=0, carbs=0, fat=0)

    if dense:
        days = [start + timedelta(days=n) for n in range((end - start).days + 1)]
    else:
        days = sorted(calories_by_day)
    series = [
        DailyCalories(day=day, calories=calories_by_day.get(day, 0)) for day in days
    ]

    return PeriodStats(
        start=start,
        end=end,
        daily_averages=averages,
        series=series,
        meal_type_counts=dict(Counter(meal.meal_type for meal in in_range)),
        day_count=day_count,
    )


def period_bounds(range_name: str, today: date) -> tuple[date, date]:
    """Return the inclusive date range ending today for a named period."""
    if range_name == "month":
        return _months_before(today, 1), today
    if range_name == "year":
        return _months_before(today, 12), today
    return today - timedelta(days=7), today


def _months_before(today: date, months: int) -> date:
    month_index = today.year * 12 + (today.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(today.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def local_today(timezone_name: str) -> date:
    """Return the current date in a timezone."""
    return datetime.now(tz=ZoneInfo(timezone_name)).date()


@dataclass
class StatsService:
    """Service for meal statistics over named periods."""

    repository: MealRepository
    profile_service: ProfileService

    def get_period(
        self, user_id: UUID, range_name: str, today: date, dense: bool = False
    ) -> tuple[PeriodStats, int]:
        """Return statistics for the period and the user's calorie goal."""
        start, end = period_bounds(range_name, today)
        meals = self.repository.list_meals(user_id, start, end)
        goal = self.profile_service.get_goals(user_id).daily_calories_goal
        return aggregate_period(meals, start, end, dense=dense), goal
