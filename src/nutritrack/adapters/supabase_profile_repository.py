"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from nutritrack.domain.profile import NutritionGoals, Profile, UserProfile
from nutritrack.services.goals import DEFAULT_CALORIE_GOAL, DEFAULT_PROTEIN_GOAL
from nutritrack.services.profiles import ProfileRepository

_COLUMNS = (
    "user_id, first_name, last_name, email, age, weight, height, gender, "
    "activity_level, fitness_goal, daily_calories_goal, daily_protein_goal"
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profiles."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile for a user."""
        response = (
            self.client.table("profiles")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def save_profile(self, profile: UserProfile) -> None:
        """Upsert a profile row keyed by user id."""
        inputs = profile.profile
        self.client.table("profiles").upsert(
            {
                "user_id": str(profile.user_id),
                "first_name": profile.first_name,
                "last_name": profile.last_name,
                "email": profile.email,
                "age": inputs.age,
                "weight": inputs.weight,
                "height": inputs.height,
                "gender": inputs.gender,
                "activity_level": inputs.activity_level,
                "fitness_goal": inputs.fitness_goal,
                "daily_calories_goal": profile.goals.daily_calories_goal,
                "daily_protein_goal": profile.goals.daily_protein_goal,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()


def _parse_profile(row: dict[str, object]) -> UserProfile:
    return UserProfile(
        user_id=UUID(str(row["user_id"])),
        profile=Profile(
            age=_optional_int(row.get("age")),
            weight=_optional_float(row.get("weight")),
            height=_optional_float(row.get("height")),
            gender=row.get("gender"),
            activity_level=row.get("activity_level"),
            fitness_goal=row.get("fitness_goal"),
        ),
        goals=NutritionGoals(
            daily_calories_goal=int(
                row.get("daily_calories_goal") or DEFAULT_CALORIE_GOAL
            ),
            daily_protein_goal=int(
                row.get("daily_protein_goal") or DEFAULT_PROTEIN_GOAL
            ),
        ),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        email=row.get("email"),
    )


def _optional_float(value: object) -> float | None:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return float(value)
    return None


def _optional_int(value: object) -> int | None:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return int(value)
    return None
