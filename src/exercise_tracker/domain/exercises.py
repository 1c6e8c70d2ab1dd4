"""Domain models for exercise logging."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ExerciseRecord:
    """Exercise row with identifiers."""

    id: str
    user_id: str
    description: str
    duration: int
    date: date


@dataclass(frozen=True)
class ExerciseLogEntry:
    """A freshly logged exercise together with its owner."""

    user_id: str
    username: str
    description: str
    duration: int
    date: date


@dataclass(frozen=True)
class ExerciseLog:
    """Filtered exercise history for a user."""

    user_id: str
    username: str
    log: list[ExerciseRecord]

    @property
    def count(self) -> int:
        return len(self.log)
