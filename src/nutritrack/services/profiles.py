"""Profile lifecycle and goal derivation."""

import logging
from dataclasses import dataclass, fields, replace
from typing import Protocol
from uuid import UUID

from nutritrack.domain.profile import NutritionGoals, Profile, UserProfile
from nutritrack.services.goals import compute_goals

_PROFILE_FIELDS = frozenset(field.name for field in fields(Profile))
_DISPLAY_FIELDS = frozenset({"first_name", "last_name", "email"})

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile for a user, if present."""

    def save_profile(self, profile: UserProfile) -> None:
        """Insert or replace a user's profile."""


@dataclass
class ProfileService:
    """Keeps stored goals in sync with profile inputs."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile, if any."""
        return self.repository.get_profile(user_id)

    def get_goals(self, user_id: UUID) -> NutritionGoals:
        """Return the user's goals, defaults when no profile exists."""
        stored = self.repository.get_profile(user_id)
        return compute_goals(stored.profile if stored else Profile())

    def ensure_profile(self, user_id: UUID, email: str | None = None) -> UserProfile:
        """Return the user's profile, creating an empty one if needed."""
        existing = self.repository.get_profile(user_id)
        if existing:
            return existing
        return self.register(user_id, Profile(), email=email)

    def register(
        self,
        user_id: UUID,
        profile: Profile,
        *,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
    ) -> UserProfile:
        """Create a profile with goals derived from its inputs."""
        created = UserProfile(
            user_id=user_id,
            profile=profile,
            goals=compute_goals(profile),
            first_name=first_name,
            last_name=last_name,
            email=email,
        )
        self.repository.save_profile(created)
        _logger.info("Registered profile", extra={"user_id": str(user_id)})
        return created

    def update_profile(self, user_id: UUID, changes: dict[str, object]) -> UserProfile:
        """Apply field changes and recompute goals.

        Goal values in ``changes`` are ignored; goals always follow the inputs.
        """
        current = self.ensure_profile(user_id)
        profile_changes = {k: v for k, v in changes.items() if k in _PROFILE_FIELDS}
        display_changes = {k: v for k, v in changes.items() if k in _DISPLAY_FIELDS}
        profile = replace(current.profile, **profile_changes)
        updated = replace(
            current,
            profile=profile,
            goals=compute_goals(profile),
            **display_changes,
        )
        self.repository.save_profile(updated)
        _logger.info(
            "Updated profile",
            extra={"user_id": str(user_id), "fields": sorted(profile_changes)},
        )
        return updated

    def preview_goals(self, profile: Profile) -> NutritionGoals:
        """Compute goals for unsaved profile inputs."""
        return compute_goals(profile)
