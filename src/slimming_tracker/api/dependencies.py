"""Request-scoped dependencies shared by the routers."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from slimming_tracker.containers import AppContainer


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def get_user_id(
    request: Request, x_user_id: str | None = Header(default=None)
) -> UUID:
    """Resolve the acting user from ``X-User-Id`` or the configured default.

    The user and profile rows are created on first sight.
    """
    container: AppContainer = request.app.state.container
    if x_user_id:
        try:
            user_id = UUID(x_user_id)
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid X-User-Id"
            ) from exc
    else:
        user_id = container.settings.default_user_id
    container.user_service.ensure_user(user_id)
    return user_id
