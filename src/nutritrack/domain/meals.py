"""Domain models for logged meals."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")


@dataclass(frozen=True)
class Meal:
    """A meal logged for a single calendar day.

    ``completed`` separates consumed meals from planned ones.
    """

    id: UUID | None
    name: str
    meal_type: str
    date: date
    calories: int
    proteins: float
    carbs: float
    fats: float
    completed: bool = False


@dataclass(frozen=True)
class MacroTotals:
    """Summed macronutrients in grams."""

    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class DayAggregate:
    """Calories and macros for one day split into consumed and planned."""

    daily_goal: int
    consumed: int
    planned: int
    consumed_macros: MacroTotals
    total_macros: MacroTotals

    @property
    def balance(self) -> int:
        """Goal minus everything logged, may be negative."""
        return self.daily_goal - self.consumed - self.planned

    @property
    def remaining(self) -> int:
        """Calories left for the day, never below zero."""
        return max(self.balance, 0)

    @property
    def is_over_goal(self) -> bool:
        return self.consumed + self.planned > self.daily_goal


@dataclass(frozen=True)
class DayMeals:
    """Meals for a calendar day, ordered by meal type."""

    day: date
    meals: list[Meal]
