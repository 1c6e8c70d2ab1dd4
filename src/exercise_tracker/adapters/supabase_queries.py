"""Shared execution helper for Supabase table queries."""

import logging
from typing import Protocol

import httpx
from postgrest.exceptions import APIError

from exercise_tracker.errors import ConflictError, StorageError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


class QueryResponse(Protocol):
    """Response returned by an executed PostgREST request."""

    data: list[dict[str, object]] | None


class ExecutableQuery(Protocol):
    """A built PostgREST request."""

    def execute(self) -> QueryResponse:
        """Send the request and return the API response."""


def fetch_rows(
    query: ExecutableQuery,
    failure_message: str,
    conflict_message: str | None = None,
) -> list[dict[str, object]]:
    """Execute ``query`` and return its rows, translating storage failures."""
    try:
        response = query.execute()
    except APIError as exc:
        if conflict_message and exc.code == UNIQUE_VIOLATION:
            raise ConflictError(conflict_message) from exc
        logger.warning("Supabase query failed (%s): %s", exc.code, exc.message)
        raise StorageError(failure_message) from exc
    except httpx.HTTPError as exc:
        logger.warning("Supabase request failed: %s", exc)
        raise StorageError(failure_message) from exc
    return response.data or []
