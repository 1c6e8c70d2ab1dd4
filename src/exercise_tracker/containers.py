"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from exercise_tracker.adapters.supabase_exercise_repository import (
    SupabaseExerciseRepository,
)
from exercise_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from exercise_tracker.config import Settings
from exercise_tracker.services.exercises import ExerciseLogService
from exercise_tracker.services.users import UserDirectory


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_directory: UserDirectory
    exercise_log_service: ExerciseLogService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_directory = UserDirectory(SupabaseUserRepository(supabase_client))
    exercise_log_service = ExerciseLogService(
        users=user_directory,
        repository=SupabaseExerciseRepository(supabase_client),
    )
    return AppContainer(
        settings=resolved_settings,
        user_directory=user_directory,
        exercise_log_service=exercise_log_service,
    )
