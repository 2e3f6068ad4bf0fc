"""Body weight endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from nutritrack.api.deps import current_user_id, get_container
from nutritrack.api.schemas import (
    WeightDifferenceOut,
    WeightHistoryOut,
    WeightIn,
    WeightOut,
)
from nutritrack.domain.stats import WeightEntry
from nutritrack.services.weights import InvalidWeightError

if TYPE_CHECKING:
    from nutritrack.containers import AppContainer

router = APIRouter(tags=["weights"])


@router.get("/weights")
async def weight_history(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> WeightHistoryOut:
    """Return weight history, seeded from the profile weight when empty."""
    container: AppContainer = get_container(request)
    stored = container.profile_service.get_profile(user_id)
    current_weight = stored.profile.weight if stored else None
    entries = container.weight_service.get_history(user_id, current_weight)
    difference = container.weight_service.weight_difference(entries)
    return WeightHistoryOut(
        entries=[_weight_out(entry) for entry in entries],
        chart=[
            _weight_out(entry)
            for entry in container.weight_service.chart_entries(entries)
        ],
        difference=(
            WeightDifferenceOut.model_validate(difference) if difference else None
        ),
    )


@router.post("/weights", status_code=status.HTTP_201_CREATED)
async def record_weight(
    payload: WeightIn, request: Request, user_id: UUID = Depends(current_user_id)
) -> WeightOut:
    """Record a new weight measurement."""
    container: AppContainer = get_container(request)
    try:
        entry = container.weight_service.record_weight(user_id, payload.weight)
    except InvalidWeightError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return _weight_out(entry)


def _weight_out(entry: WeightEntry) -> WeightOut:
    return WeightOut(
        id=entry.id, weight=entry.weight, date=entry.day, timestamp=entry.timestamp
    )
