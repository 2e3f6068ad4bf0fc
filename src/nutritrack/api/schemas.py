"""Pydantic request and response models for the HTTP API."""

from datetime import date, datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from nutritrack.domain.foods import FoodItem

MealType = Literal["breakfast", "lunch", "dinner", "snack"]


class ProfileFields(BaseModel):
    """Profile inputs; every field may be omitted."""

    age: int | None = None
    weight: float | None = None
    height: float | None = None
    gender: str | None = None
    activity_level: str | None = None
    fitness_goal: str | None = None


class ProfileIn(ProfileFields):
    """Registration or update payload."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None


class GoalsOut(BaseModel):
    """Derived daily goals."""

    model_config = ConfigDict(from_attributes=True)

    daily_calories_goal: int
    daily_protein_goal: int


class ProfileOut(ProfileIn):
    """Stored profile with goals."""

    user_id: UUID
    goals: GoalsOut


class MealIn(BaseModel):
    """Directly entered meal."""

    name: str = Field(min_length=1)
    meal_type: MealType
    date: date
    calories: int = Field(ge=0)
    proteins: float = Field(default=0.0, ge=0.0)
    carbs: float = Field(default=0.0, ge=0.0)
    fats: float = Field(default=0.0, ge=0.0)
    completed: bool = False


class MealOut(BaseModel):
    """Stored meal."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID | None
    name: str
    meal_type: str
    date: date
    calories: int
    proteins: float
    carbs: float
    fats: float
    completed: bool


class FoodSelection(BaseModel):
    """A food and the number of servings eaten."""

    food: FoodItem
    quantity: float = Field(gt=0.0)


class MealFromFoodsIn(BaseModel):
    """Meal composed from selected foods."""

    meal_type: MealType
    date: date
    foods: list[FoodSelection] = Field(min_length=1)


class MealStatusIn(BaseModel):
    """Completion update; omit ``completed`` to toggle."""

    completed: bool | None = None


class MacrosOut(BaseModel):
    """Macronutrient totals in grams."""

    model_config = ConfigDict(from_attributes=True)

    protein: float
    carbs: float
    fat: float


class DashboardOut(BaseModel):
    """Daily overview for the dashboard."""

    date: date
    goals: GoalsOut
    consumed: int
    planned: int
    remaining: int
    balance: int
    is_over_goal: bool
    consumed_percentage: int
    consumed_macros: MacrosOut
    total_macros: MacrosOut
    meals: list[MealOut]


class DayPlanOut(BaseModel):
    """A calendar day with its meals."""

    date: date
    meals: list[MealOut]


class DailyCaloriesOut(BaseModel):
    """One point of the calorie trend."""

    date: date
    calories: int


class DailyAveragesOut(BaseModel):
    """Average intake per logged day."""

    model_config = ConfigDict(from_attributes=True)

    calories: int
    protein: int
    carbs: int
    fat: int


class PeriodStatsOut(BaseModel):
    """Statistics for a date range."""

    range: str
    start: date
    end: date
    daily_calories_goal: int
    daily_averages: DailyAveragesOut
    series: list[DailyCaloriesOut]
    meal_type_counts: dict[str, int]
    day_count: int


class ScaleFoodIn(BaseModel):
    """Scale a food by a quantity."""

    food: FoodItem
    quantity: float = Field(gt=0.0)


class WeightIn(BaseModel):
    """New weight measurement."""

    weight: float


class WeightOut(BaseModel):
    """Recorded weight."""

    id: UUID | None
    weight: float
    date: date
    timestamp: datetime


class WeightDifferenceOut(BaseModel):
    """Change between the two most recent weights."""

    model_config = ConfigDict(from_attributes=True)

    value: float
    is_gain: bool
    is_loss: bool


class WeightHistoryOut(BaseModel):
    """Full weight history and the entries shown on the trend chart."""

    entries: list[WeightOut]
    chart: list[WeightOut]
    difference: WeightDifferenceOut | None = None
