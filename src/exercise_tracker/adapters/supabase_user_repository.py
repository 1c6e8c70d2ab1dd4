"""Supabase-backed user repository."""

from dataclasses import dataclass

from supabase import Client

from exercise_tracker.adapters.supabase_queries import fetch_rows
from exercise_tracker.domain.models import UserRecord
from exercise_tracker.errors import StorageError
from exercise_tracker.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def create_user(self, username: str) -> UserRecord:
        """Insert a user row and return it."""
        rows = fetch_rows(
            self.client.table("users").insert({"username": username}),
            failure_message="Could not create user",
            conflict_message="Username already exists",
        )
        if not rows:
            raise StorageError("Could not create user")
        return _parse_user(rows[0])

    def list_users(self) -> list[UserRecord]:
        """Return all users projected to id and username."""
        rows = fetch_rows(
            self.client.table("users").select("id, username"),
            failure_message="Could not retrieve users",
        )
        return [_parse_user(row) for row in rows]

    def get_user(self, user_id: str) -> UserRecord | None:
        """Return the user for an id, if present."""
        rows = fetch_rows(
            self.client.table("users")
            .select("id, username")
            .eq("id", user_id)
            .limit(1),
            failure_message="Could not retrieve user",
        )
        if rows:
            return _parse_user(rows[0])
        return None


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(id=str(row["id"]), username=str(row["username"]))
