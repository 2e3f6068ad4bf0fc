"""Daily calorie and protein goal calculations.

Calories use the revised Harris-Benedict equation scaled by activity and
fitness goal multipliers. Protein uses grams per kilogram of body weight.
Incomplete profiles never raise: they fall back to fixed defaults so the
dashboard always has a number to show.
"""

import logging
import math

from nutritrack.domain.profile import NutritionGoals, Profile
from nutritrack.rounding import round_half_up_int

DEFAULT_CALORIE_GOAL = 2000
DEFAULT_PROTEIN_GOAL = 120

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "veryActive": 1.9,
}
GOAL_MULTIPLIERS = {
    "weightLoss": 0.8,
    "maintenance": 1.0,
    "muscleGain": 1.1,
    "extremeGain": 1.2,
}
PROTEIN_FACTORS = {
    "sedentary": 1.6,
    "light": 1.8,
    "moderate": 2.0,
    "active": 2.2,
    "veryActive": 2.4,
}
PROTEIN_GOAL_FACTORS = {
    "weightLoss": 1.2,
    "maintenance": 1.0,
    "muscleGain": 1.2,
    "extremeGain": 1.1,
}

_ACTIVITY_ALIASES = {"very_active": "veryActive"}
_DEFAULT_ACTIVITY = "moderate"
_DEFAULT_GOAL = "maintenance"

_logger = logging.getLogger(__name__)


def compute_daily_calorie_goal(profile: Profile) -> int:
    """Return the daily calorie target in kcal."""
    age = _positive_number(profile.age)
    weight = _positive_number(profile.weight)
    height = _positive_number(profile.height)
    if age is None or weight is None or height is None:
        _logger.debug("Incomplete profile, using default calorie goal")
        return DEFAULT_CALORIE_GOAL

    bmr = basal_metabolic_rate(weight, height, age, profile.gender)
    calories = (
        bmr
        * activity_multiplier(profile.activity_level)
        * goal_multiplier(profile.fitness_goal)
    )
    if not math.isfinite(calories):
        return DEFAULT_CALORIE_GOAL
    rounded = round_half_up_int(calories)
    if rounded <= 0:
        _logger.debug("Non-positive calorie goal %s, using default", rounded)
        return DEFAULT_CALORIE_GOAL
    return rounded


def compute_daily_protein_goal(profile: Profile) -> int:
    """Return the daily protein target in grams."""
    weight = _positive_number(profile.weight)
    if weight is None:
        return DEFAULT_PROTEIN_GOAL
    activity = normalize_activity_level(profile.activity_level)
    factor = PROTEIN_FACTORS.get(activity, PROTEIN_FACTORS[_DEFAULT_ACTIVITY])
    goal_factor = PROTEIN_GOAL_FACTORS.get(
        profile.fitness_goal, PROTEIN_GOAL_FACTORS[_DEFAULT_GOAL]
    )
    return round_half_up_int(weight * factor * goal_factor)


def compute_goals(profile: Profile) -> NutritionGoals:
    """Return both daily goals for a profile."""
    return NutritionGoals(
        daily_calories_goal=compute_daily_calorie_goal(profile),
        daily_protein_goal=compute_daily_protein_goal(profile),
    )


def basal_metabolic_rate(
    weight: float, height: float, age: float, gender: str | None
) -> float:
    """Harris-Benedict BMR; unspecified gender averages both equations."""
    male = 88.362 + 13.397 * weight + 4.799 * height - 5.677 * age
    female = 447.593 + 9.247 * weight + 3.098 * height - 4.330 * age
    if gender == "male":
        return male
    if gender == "female":
        return female
    return (male + female) / 2


def activity_multiplier(activity_level: str | None) -> float:
    """Return the activity multiplier, moderate when unrecognized."""
    return ACTIVITY_MULTIPLIERS.get(
        normalize_activity_level(activity_level),
        ACTIVITY_MULTIPLIERS[_DEFAULT_ACTIVITY],
    )


def goal_multiplier(fitness_goal: str | None) -> float:
    """Return the goal multiplier, maintenance when unrecognized."""
    return GOAL_MULTIPLIERS.get(fitness_goal, GOAL_MULTIPLIERS[_DEFAULT_GOAL])


def normalize_activity_level(activity_level: str | None) -> str | None:
    """Map legacy spellings onto the canonical activity level ids."""
    if activity_level is None:
        return None
    return _ACTIVITY_ALIASES.get(activity_level, activity_level)


def _positive_number(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    if not isinstance(value, int | float):
        return None
    number = float(value)
    if not math.isfinite(number) or number <= 0:
        return None
    return number
