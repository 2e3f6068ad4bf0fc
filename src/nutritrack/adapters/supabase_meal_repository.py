"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from supabase import Client

from nutritrack.domain.meals import Meal
from nutritrack.services.meals import MealRepository

_COLUMNS = "id, name, meal_type, date, calories, proteins, carbs, fats, completed"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def create_meal(self, user_id: UUID, meal: Meal) -> Meal:
        """Insert a meal row and return the stored meal."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "user_id": str(user_id),
                    "name": meal.name,
                    "meal_type": meal.meal_type,
                    "date": meal.date.isoformat(),
                    "calories": meal.calories,
                    "proteins": meal.proteins,
                    "carbs": meal.carbs,
                    "fats": meal.fats,
                    "completed": meal.completed,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])

    def get_meal(self, user_id: UUID, meal_id: UUID) -> Meal | None:
        """Return a meal by id."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def list_meals(self, user_id: UUID, start: date, end: date) -> list[Meal]:
        """Return meals dated within the inclusive day range."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lt("date", (end + timedelta(days=1)).isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def set_completed(self, user_id: UUID, meal_id: UUID, completed: bool) -> None:
        """Update the completed flag."""
        self.client.table("meals").update({"completed": completed}).eq(
            "id", str(meal_id)
        ).eq("user_id", str(user_id)).execute()

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        """Delete a meal row."""
        self.client.table("meals").delete().eq("id", str(meal_id)).eq(
            "user_id", str(user_id)
        ).execute()


def _parse_meal(row: dict[str, object]) -> Meal:
    return Meal(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        meal_type=str(row.get("meal_type") or ""),
        date=parse_day(str(row["date"])),
        calories=int(row.get("calories") or 0),
        proteins=float(row.get("proteins") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fats=float(row.get("fats") or 0.0),
        completed=bool(row.get("completed", False)),
    )


def parse_day(raw: str) -> date:
    """Parse a calendar day from a date or timestamp string."""
    return date.fromisoformat(raw[:10])
