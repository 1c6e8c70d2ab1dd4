"""Tests for the user directory."""

import pytest

from exercise_tracker.errors import ConflictError, NotFoundError, ValidationError


def test_register_creates_user(user_directory, user_repository) -> None:
    user = user_directory.register("alice")

    assert user.username == "alice"
    assert user_repository.users[user.id] == user


@pytest.mark.parametrize("username", [None, ""])
def test_register_requires_username(user_directory, username) -> None:
    with pytest.raises(ValidationError) as exc_info:
        user_directory.register(username)

    assert exc_info.value.message == "Username is required"


def test_register_duplicate_username_conflicts(
    user_directory, user_repository
) -> None:
    user_directory.register("alice")

    with pytest.raises(ConflictError):
        user_directory.register("alice")

    assert len(user_repository.users) == 1


def test_list_users_matches_registration(user_directory) -> None:
    alice = user_directory.register("alice")
    bob = user_directory.register("bob")

    assert user_directory.list_users() == [alice, bob]


def test_get_user_unknown_id_raises(user_directory) -> None:
    with pytest.raises(NotFoundError):
        user_directory.get_user("00000000-0000-0000-0000-000000000000")
