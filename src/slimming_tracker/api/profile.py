"""Profile endpoints for the acting user."""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Request

from slimming_tracker.api.dependencies import get_user_id
from slimming_tracker.api.views import profile_view, user_view
from slimming_tracker.containers import AppContainer

router = APIRouter(prefix="/api/auth", tags=["profile"])


@router.get("/profile")
async def get_profile(
    request: Request, user_id: UUID = Depends(get_user_id)
) -> dict[str, object]:
    """Return the user together with their allowances and goals."""
    container: AppContainer = request.app.state.container
    user, profile = container.user_service.ensure_user(user_id)
    return {"user": user_view(user), "profile": profile_view(profile)}


@router.put("/profile")
async def update_profile(
    request: Request,
    changes: dict[str, Any] = Body(...),
    user_id: UUID = Depends(get_user_id),
) -> dict[str, object]:
    """Apply a partial camelCase profile update."""
    container: AppContainer = request.app.state.container
    profile = container.user_service.update_profile(user_id, changes)
    return profile_view(profile)
