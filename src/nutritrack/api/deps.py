"""Shared FastAPI dependencies."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import Header, HTTPException, Request, status

from nutritrack.services.stats import local_today

if TYPE_CHECKING:
    from nutritrack.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the app."""
    return request.app.state.container


async def current_user_id(x_user_id: str | None = Header(default=None)) -> UUID:
    """Resolve the caller's user id from the X-User-Id header."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    try:
        return UUID(x_user_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED) from None


def resolve_day(container: AppContainer, day: date | None) -> date:
    """Return ``day`` or today in the configured timezone."""
    return day or local_today(container.settings.default_timezone)
