"""Supabase repository for weight entries."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from nutritrack.adapters.supabase_meal_repository import parse_day
from nutritrack.domain.stats import WeightEntry
from nutritrack.services.weights import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight history."""

    client: Client

    def add_entry(self, user_id: UUID, entry: WeightEntry) -> WeightEntry:
        """Insert a weight row and return the stored entry."""
        response = (
            self.client.table("weights")
            .insert(
                {
                    "user_id": str(user_id),
                    "weight": entry.weight,
                    "date": entry.day.isoformat(),
                    "timestamp": entry.timestamp.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to record weight")
        return _parse_entry(response.data[0])

    def list_entries(self, user_id: UUID) -> list[WeightEntry]:
        """Return a user's weights, oldest first."""
        response = (
            self.client.table("weights")
            .select("id, weight, date, timestamp")
            .eq("user_id", str(user_id))
            .order("timestamp", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]


def _parse_entry(row: dict[str, object]) -> WeightEntry:
    return WeightEntry(
        id=UUID(str(row["id"])),
        weight=float(row.get("weight", 0.0)),
        day=parse_day(str(row["date"])),
        timestamp=datetime.fromisoformat(str(row["timestamp"])),
    )
