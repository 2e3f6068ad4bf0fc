"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class DailyAverages:
    """Per-day averages over the days that have meals."""

    calories: int
    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class DailyCalories:
    """Calories for one day of a trend series."""

    day: date
    calories: int


@dataclass(frozen=True)
class PeriodStats:
    """Aggregated statistics for a date range."""

    start: date
    end: date
    daily_averages: DailyAverages
    series: list[DailyCalories]
    meal_type_counts: dict[str, int]
    day_count: int


@dataclass(frozen=True)
class WeightEntry:
    """A recorded body weight."""

    id: UUID | None
    weight: float
    day: date
    timestamp: datetime


@dataclass(frozen=True)
class WeightDifference:
    """Change between the two most recent weights, in kg."""

    value: float
    is_gain: bool
    is_loss: bool
