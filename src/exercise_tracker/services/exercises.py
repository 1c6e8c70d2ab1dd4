"""Exercise logging and history queries."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol

from exercise_tracker.domain.exercises import (
    ExerciseLog,
    ExerciseLogEntry,
    ExerciseRecord,
)
from exercise_tracker.domain.models import UserRecord
from exercise_tracker.errors import StorageError, ValidationError
from exercise_tracker.services.users import UserDirectory

logger = logging.getLogger(__name__)

DEFAULT_LOG_LIMIT = 100

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ExerciseRepository(Protocol):
    """Persistence interface for exercise entries."""

    def create_exercise(
        self, user_id: str, description: str, duration: int, day: date
    ) -> ExerciseRecord:
        """Create an exercise row and return it."""

    def list_exercises(
        self,
        user_id: str,
        start: date | None,
        end: date | None,
        limit: int,
    ) -> list[ExerciseRecord]:
        """Return at most ``limit`` exercises with ``start <= date <= end``.

        Either bound may be ``None``. Order is whatever storage returns.
        """


def _utc_today() -> date:
    return datetime.now(tz=UTC).date()


@dataclass
class ExerciseLogService:
    """Service for appending and querying a user's exercise log."""

    users: UserDirectory
    repository: ExerciseRepository
    today: Callable[[], date] = _utc_today

    def add_exercise(
        self,
        user_id: str,
        description: str | None,
        duration: str | None,
        day: str | None = None,
    ) -> ExerciseLogEntry:
        """Log an exercise for an existing user."""
        user = self._lookup(user_id, "Error adding exercise")
        if not description or not duration:
            raise ValidationError("Description and duration are required")
        minutes = parse_duration(duration)
        entry_day = parse_day(day) if day else self.today()

        record = self.repository.create_exercise(
            user_id=user.id,
            description=description,
            duration=minutes,
            day=entry_day,
        )
        logger.info("Logged exercise %s for user %s", record.id, user.id)
        return ExerciseLogEntry(
            user_id=user.id,
            username=user.username,
            description=record.description,
            duration=record.duration,
            date=record.date,
        )

    def get_log(
        self,
        user_id: str,
        start: str | None = None,
        end: str | None = None,
        limit: str | None = None,
    ) -> ExerciseLog:
        """Return the user's exercises filtered by inclusive date bounds."""
        user = self._lookup(user_id, "Error retrieving logs")
        records = self.repository.list_exercises(
            user_id=user.id,
            start=parse_day(start) if start else None,
            end=parse_day(end) if end else None,
            limit=parse_limit(limit),
        )
        return ExerciseLog(user_id=user.id, username=user.username, log=records)

    def _lookup(self, user_id: str, failure_message: str) -> UserRecord:
        try:
            return self.users.get_user(user_id)
        except StorageError as exc:
            raise StorageError(failure_message) from exc


def parse_duration(raw: str) -> int:
    """Parse the leading integer of ``raw`` as minutes."""
    match = _LEADING_INT.match(raw)
    if not match:
        raise ValidationError("Duration must be a number")
    return int(match.group(1))


def parse_day(raw: str) -> date:
    """Parse an ISO-8601 date or date-time into a calendar day."""
    value = raw.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        moment = datetime.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError(f"Invalid date: {raw}") from exc
    if moment.tzinfo is not None:
        moment = moment.astimezone(UTC)
    return moment.date()


def parse_limit(raw: str | None) -> int:
    """Return a positive limit from ``raw`` or the default cap."""
    if raw:
        match = _LEADING_INT.match(raw)
        if match and int(match.group(1)) > 0:
            return int(match.group(1))
    return DEFAULT_LOG_LIMIT


def format_day(day: date) -> str:
    """Render a day as e.g. ``Mon Jan 01 2024``."""
    return day.strftime("%a %b %d %Y")
