"""Domain models for user profiles and nutrition goals."""

from dataclasses import dataclass
from uuid import UUID

GENDERS = ("male", "female", "other")
ACTIVITY_LEVELS = ("sedentary", "light", "moderate", "active", "veryActive")
FITNESS_GOALS = ("weightLoss", "maintenance", "muscleGain", "extremeGain")


@dataclass(frozen=True)
class Profile:
    """Physiological inputs used to derive daily goals.

    Numeric fields are optional because an account can exist before the user
    has filled in the profile form.
    """

    age: int | None = None
    weight: float | None = None
    height: float | None = None
    gender: str | None = None
    activity_level: str | None = None
    fitness_goal: str | None = None


@dataclass(frozen=True)
class NutritionGoals:
    """Daily targets derived from a profile."""

    daily_calories_goal: int
    daily_protein_goal: int


@dataclass(frozen=True)
class UserProfile:
    """Stored profile with display fields and derived goals."""

    user_id: UUID
    profile: Profile
    goals: NutritionGoals
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
