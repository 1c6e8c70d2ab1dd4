"""Supabase repository for exercise entries."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from exercise_tracker.adapters.supabase_queries import fetch_rows
from exercise_tracker.domain.exercises import ExerciseRecord
from exercise_tracker.errors import StorageError
from exercise_tracker.services.exercises import ExerciseRepository

_COLUMNS = "id, user_id, description, duration, date"


@dataclass
class SupabaseExerciseRepository(ExerciseRepository):
    """Supabase implementation for exercise entries."""

    client: Client

    def create_exercise(
        self, user_id: str, description: str, duration: int, day: date
    ) -> ExerciseRecord:
        """Insert an exercise row and return it."""
        rows = fetch_rows(
            self.client.table("exercises").insert(
                {
                    "user_id": user_id,
                    "description": description,
                    "duration": duration,
                    "date": day.isoformat(),
                }
            ),
            failure_message="Error adding exercise",
        )
        if not rows:
            raise StorageError("Error adding exercise")
        return _parse_exercise(rows[0])

    def list_exercises(
        self,
        user_id: str,
        start: date | None,
        end: date | None,
        limit: int,
    ) -> list[ExerciseRecord]:
        """Return a user's exercises within the inclusive date range."""
        query = self.client.table("exercises").select(_COLUMNS).eq("user_id", user_id)
        if start is not None:
            query = query.gte("date", start.isoformat())
        if end is not None:
            query = query.lte("date", end.isoformat())
        rows = fetch_rows(query.limit(limit), failure_message="Error retrieving logs")
        return [_parse_exercise(row) for row in rows]


def _parse_exercise(row: dict[str, object]) -> ExerciseRecord:
    return ExerciseRecord(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        description=str(row.get("description", "")),
        duration=int(row.get("duration", 0)),
        date=date.fromisoformat(str(row["date"])[:10]),
    )
