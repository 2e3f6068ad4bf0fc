"""Tests for stats service."""

from datetime import date
from uuid import uuid4

from nutritrack.services.profiles import ProfileService
from nutritrack.services.stats import StatsService, aggregate_period, period_bounds
from tests.conftest import InMemoryMealRepository, make_meal


def test_aggregate_period_averages_over_days_with_meals() -> None:
    meals = [
        make_meal(date(2024, 5, 1), 1000, proteins=50, carbs=100, fats=30),
        make_meal(date(2024, 5, 1), 500, proteins=25, carbs=50, fats=15),
        make_meal(date(2024, 5, 3), 1001, proteins=40, carbs=81, fats=20),
    ]

    stats = aggregate_period(meals, date(2024, 5, 1), date(2024, 5, 7))

    assert stats.day_count == 2
    assert stats.daily_averages.calories == 1251
    assert stats.daily_averages.protein == 58
    assert stats.daily_averages.carbs == 116
    assert stats.daily_averages.fat == 33
    assert [(point.day, point.calories) for point in stats.series] == [
        (date(2024, 5, 1), 1500),
        (date(2024, 5, 3), 1001),
    ]


def test_aggregate_period_ignores_meals_outside_range() -> None:
    meals = [
        make_meal(date(2024, 4, 30), 800),
        make_meal(date(2024, 5, 8), 900),
    ]

    stats = aggregate_period(meals, date(2024, 5, 1), date(2024, 5, 7))

    assert stats.day_count == 0
    assert stats.series == []
    assert stats.daily_averages.calories == 0
    assert stats.meal_type_counts == {}


def test_aggregate_period_dense_series_fills_missing_days() -> None:
    meals = [make_meal(date(2024, 5, 2), 700, meal_type="dinner")]

    stats = aggregate_period(meals, date(2024, 5, 1), date(2024, 5, 3), dense=True)

    assert [point.calories for point in stats.series] == [0, 700, 0]
    assert stats.meal_type_counts == {"dinner": 1}


def test_period_bounds() -> None:
    today = date(2024, 3, 31)

    assert period_bounds("week", today) == (date(2024, 3, 24), today)
    assert period_bounds("month", today) == (date(2024, 2, 29), today)
    assert period_bounds("year", today) == (date(2023, 3, 31), today)
    assert period_bounds("year", date(2024, 2, 29))[0] == date(2023, 2, 28)


def test_get_period_returns_goal_and_stats(
    meal_repository: InMemoryMealRepository, profile_service: ProfileService
) -> None:
    user_id = uuid4()
    meal_repository.create_meal(user_id, make_meal(date(2024, 6, 10), 1200))
    meal_repository.create_meal(user_id, make_meal(date(2024, 5, 1), 3000))
    meal_repository.create_meal(uuid4(), make_meal(date(2024, 6, 10), 999))

    service = StatsService(repository=meal_repository, profile_service=profile_service)
    stats, goal = service.get_period(user_id, "week", date(2024, 6, 12))

    assert goal == 2000
    assert stats.day_count == 1
    assert stats.daily_averages.calories == 1200
