"""Tests for container wiring."""

from exercise_tracker.adapters.supabase_exercise_repository import (
    SupabaseExerciseRepository,
)
from exercise_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert isinstance(
        container.exercise_log_service.repository, SupabaseExerciseRepository
    )
    assert container.exercise_log_service.users is container.user_directory
