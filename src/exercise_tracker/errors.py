"""Application error taxonomy."""


class ExerciseTrackerError(Exception):
    """Base error carrying a message that is safe to return to clients."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ExerciseTrackerError):
    """A required field is missing or a value cannot be parsed."""


class ConflictError(ExerciseTrackerError):
    """A unique value already exists in storage."""


class NotFoundError(ExerciseTrackerError):
    """The referenced record does not exist."""


class StorageError(ExerciseTrackerError):
    """The persistence layer failed or rejected the request."""
