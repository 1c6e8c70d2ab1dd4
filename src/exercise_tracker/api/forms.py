"""Request models for the exercise tracker endpoints."""

import math

from fastapi import Request
from pydantic import BaseModel, field_validator

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _as_text(value: object) -> str | None:
    """Coerce scalar inputs to text; anything else counts as missing."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    # Zero is falsy in the body and counts as missing.
    if not value or not math.isfinite(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class CreateUserForm(BaseModel):
    """Body for ``POST /api/users``."""

    username: str | None = None

    @field_validator("username", mode="before")
    @classmethod
    def coerce_text(cls, value: object) -> str | None:
        return _as_text(value)


class AddExerciseForm(BaseModel):
    """Body for ``POST /api/users/{user_id}/exercises``."""

    description: str | None = None
    duration: str | None = None
    date: str | None = None

    @field_validator("description", "duration", "date", mode="before")
    @classmethod
    def coerce_text(cls, value: object) -> str | None:
        return _as_text(value)


async def read_payload(request: Request) -> dict[str, object]:
    """Return the request body as a mapping, from JSON or form data."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}
