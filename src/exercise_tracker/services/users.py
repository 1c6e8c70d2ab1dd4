"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from exercise_tracker.domain.models import UserRecord
from exercise_tracker.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def create_user(self, username: str) -> UserRecord:
        """Create and return a new user record.

        Raises ``ConflictError`` when the username is already taken.
        """

    def list_users(self) -> list[UserRecord]:
        """Return all users."""

    def get_user(self, user_id: str) -> UserRecord | None:
        """Return the user with the given id, if present."""


@dataclass
class UserDirectory:
    """Application service for registering and looking up users."""

    repository: UserRepository

    def register(self, username: str | None) -> UserRecord:
        """Create a user with a unique username."""
        if not username:
            raise ValidationError("Username is required")
        user = self.repository.create_user(username)
        logger.info("Registered user %s", user.id)
        return user

    def list_users(self) -> list[UserRecord]:
        """Return every registered user."""
        return self.repository.list_users()

    def get_user(self, user_id: str) -> UserRecord:
        """Return the user or raise ``NotFoundError``."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
