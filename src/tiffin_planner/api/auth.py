"""Bearer token dependency for authenticated endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import Header, Request

from tiffin_planner.domain.errors import AuthenticationError

if TYPE_CHECKING:
    from tiffin_planner.containers import AppContainer


async def require_owner(
    request: Request,
    authorization: str | None = Header(default=None),
) -> UUID:
    """Resolve the authenticated user id from the Authorization header."""
    if not authorization:
        raise AuthenticationError("Missing auth")
    _, _, token = authorization.partition(" ")
    if not token.strip():
        raise AuthenticationError("Invalid token")
    container: AppContainer = request.app.state.container
    return container.token_service.resolve_owner(token.strip())
