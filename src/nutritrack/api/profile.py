"""Profile and goal endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from nutritrack.api.deps import current_user_id, get_container
from nutritrack.api.schemas import GoalsOut, ProfileFields, ProfileIn, ProfileOut
from nutritrack.domain.profile import Profile, UserProfile

if TYPE_CHECKING:
    from nutritrack.containers import AppContainer

router = APIRouter(tags=["profile"])


@router.get("/profile")
async def get_profile(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> ProfileOut:
    """Return the caller's profile."""
    container: AppContainer = get_container(request)
    stored = container.profile_service.get_profile(user_id)
    if stored is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return _profile_out(stored)


@router.post("/profile", status_code=status.HTTP_201_CREATED)
async def register_profile(
    payload: ProfileIn, request: Request, user_id: UUID = Depends(current_user_id)
) -> ProfileOut:
    """Create the caller's profile and derive goals."""
    container: AppContainer = get_container(request)
    created = container.profile_service.register(
        user_id,
        _profile_from(payload),
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
    )
    return _profile_out(created)


@router.put("/profile")
async def update_profile(
    payload: ProfileIn, request: Request, user_id: UUID = Depends(current_user_id)
) -> ProfileOut:
    """Update profile fields; goals are recomputed."""
    container: AppContainer = get_container(request)
    updated = container.profile_service.update_profile(
        user_id, payload.model_dump(exclude_unset=True)
    )
    return _profile_out(updated)


@router.post("/goals/preview")
async def preview_goals(payload: ProfileFields, request: Request) -> GoalsOut:
    """Compute goals for unsaved profile inputs."""
    container: AppContainer = get_container(request)
    goals = container.profile_service.preview_goals(_profile_from(payload))
    return GoalsOut.model_validate(goals)


def _profile_from(payload: ProfileFields) -> Profile:
    return Profile(
        age=payload.age,
        weight=payload.weight,
        height=payload.height,
        gender=payload.gender,
        activity_level=payload.activity_level,
        fitness_goal=payload.fitness_goal,
    )


def _profile_out(stored: UserProfile) -> ProfileOut:
    inputs = stored.profile
    return ProfileOut(
        user_id=stored.user_id,
        first_name=stored.first_name,
        last_name=stored.last_name,
        email=stored.email,
        age=inputs.age,
        weight=inputs.weight,
        height=inputs.height,
        gender=inputs.gender,
        activity_level=inputs.activity_level,
        fitness_goal=inputs.fitness_goal,
        goals=GoalsOut.model_validate(stored.goals),
    )
