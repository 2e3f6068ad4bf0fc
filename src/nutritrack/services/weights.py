"""Weight tracking service."""

import math
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from nutritrack.domain.stats import WeightDifference, WeightEntry
from nutritrack.rounding import round_half_up

CHART_ENTRY_LIMIT = 7


class InvalidWeightError(ValueError):
    """Raised when a submitted weight is not a positive number."""


class WeightRepository(Protocol):
    """Persistence interface for weight entries."""

    def add_entry(self, user_id: UUID, entry: WeightEntry) -> WeightEntry:
        """Persist a weight entry and return it with its id."""

    def list_entries(self, user_id: UUID) -> list[WeightEntry]:
        """Return all entries ordered by timestamp ascending."""


@dataclass
class WeightService:
    """Service for recording and reading body weight history."""

    repository: WeightRepository

    def record_weight(
        self, user_id: UUID, weight: float, now: datetime | None = None
    ) -> WeightEntry:
        """Store a new weight measurement."""
        if isinstance(weight, bool) or not isinstance(weight, int | float):
            raise InvalidWeightError("weight must be a number")
        if not math.isfinite(weight) or weight <= 0:
            raise InvalidWeightError("weight must be positive")
        timestamp = now or datetime.now(tz=UTC)
        entry = WeightEntry(
            id=None, weight=float(weight), day=timestamp.date(), timestamp=timestamp
        )
        return self.repository.add_entry(user_id, entry)

    def get_history(
        self,
        user_id: UUID,
        current_weight: float | None = None,
        now: datetime | None = None,
    ) -> list[WeightEntry]:
        """Return the weight history.

        A user with no entries but a profile weight gets a single unsaved
        entry for today so the chart has a starting point.
        """
        entries = self.repository.list_entries(user_id)
        if entries or not current_weight or current_weight <= 0:
            return entries
        timestamp = now or datetime.now(tz=UTC)
        return [
            WeightEntry(
                id=None,
                weight=float(current_weight),
                day=timestamp.date(),
                timestamp=timestamp,
            )
        ]

    def chart_entries(
        self, entries: list[WeightEntry], limit: int = CHART_ENTRY_LIMIT
    ) -> list[WeightEntry]:
        """Return the most recent entries for the trend chart."""
        return entries[-limit:] if limit > 0 else []

    def weight_difference(
        self, entries: list[WeightEntry]
    ) -> WeightDifference | None:
        """Return the change between the last two entries, if there are two."""
        if len(entries) < 2:  # noqa: PLR2004
            return None
        previous, latest = entries[-2].weight, entries[-1].weight
        return WeightDifference(
            value=round_half_up(abs(latest - previous), 1),
            is_gain=latest > previous,
            is_loss=latest < previous,
        )
