"""User and exercise log endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request

from exercise_tracker.api.forms import AddExerciseForm, CreateUserForm, read_payload
from exercise_tracker.services.exercises import format_day

if TYPE_CHECKING:
    from exercise_tracker.containers import AppContainer
    from exercise_tracker.domain.exercises import (
        ExerciseLog,
        ExerciseLogEntry,
        ExerciseRecord,
    )
    from exercise_tracker.domain.models import UserRecord

router = APIRouter(prefix="/api/users", tags=["users"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.post("")
def create_user(
    request: Request, payload: dict[str, object] = Depends(read_payload)
) -> dict[str, object]:
    """Register a new user."""
    form = CreateUserForm.model_validate(payload)
    user = _container(request).user_directory.register(form.username)
    return _serialize_user(user)


@router.get("")
def list_users(request: Request) -> list[dict[str, object]]:
    """Return all users."""
    users = _container(request).user_directory.list_users()
    return [_serialize_user(user) for user in users]


@router.post("/{user_id}/exercises")
def add_exercise(
    user_id: str,
    request: Request,
    payload: dict[str, object] = Depends(read_payload),
) -> dict[str, object]:
    """Log an exercise for a user."""
    form = AddExerciseForm.model_validate(payload)
    entry = _container(request).exercise_log_service.add_exercise(
        user_id,
        description=form.description,
        duration=form.duration,
        day=form.date,
    )
    return _serialize_entry(entry)


@router.get("/{user_id}/logs")
def get_log(
    user_id: str,
    request: Request,
    from_: str | None = Query(default=None, alias="from"),
    to: str | None = None,
    limit: str | None = None,
) -> dict[str, object]:
    """Return a user's exercise log."""
    log = _container(request).exercise_log_service.get_log(
        user_id, start=from_, end=to, limit=limit
    )
    return _serialize_log(log)


def _serialize_user(user: UserRecord) -> dict[str, object]:
    return {"username": user.username, "_id": user.id}


def _serialize_entry(entry: ExerciseLogEntry) -> dict[str, object]:
    # _id is the owner's id, not the exercise's.
    return {
        "username": entry.username,
        "description": entry.description,
        "duration": entry.duration,
        "date": format_day(entry.date),
        "_id": entry.user_id,
    }


def _serialize_log(log: ExerciseLog) -> dict[str, object]:
    return {
        "username": log.username,
        "count": log.count,
        "_id": log.user_id,
        "log": [_serialize_record(record) for record in log.log],
    }


def _serialize_record(record: ExerciseRecord) -> dict[str, object]:
    return {
        "description": record.description,
        "duration": record.duration,
        "date": format_day(record.date),
    }
