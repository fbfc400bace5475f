"""Translate Supabase failures into domain errors."""

import logging
from typing import Any, Protocol

import httpx
from supabase import PostgrestAPIError

from tiffin_planner.domain.errors import ConflictError, StorageError

_logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


class _Executable(Protocol):
    def execute(self) -> Any:  # noqa: ANN401
        """Run the query and return the PostgREST response."""


def execute(query: _Executable, action: str) -> Any:  # noqa: ANN401
    """Execute a query, raising ``ConflictError`` or ``StorageError`` on failure."""
    try:
        return query.execute()
    except PostgrestAPIError as exc:
        if exc.code == UNIQUE_VIOLATION:
            raise ConflictError(f"Duplicate key while trying to {action}") from exc
        _logger.exception("Supabase request failed: %s", action)
        raise StorageError(f"Failed to {action}") from exc
    except httpx.HTTPError as exc:
        _logger.exception("Supabase unreachable: %s", action)
        raise StorageError(f"Failed to {action}") from exc
