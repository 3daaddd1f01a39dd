from __future__ import annotations

import pytest

from jobly.errors import ConflictError, NotFoundError
from jobly.schemas.user import UserCreate, UserUpdate
from jobly.services import user_service


def _user(username: str, **overrides) -> UserCreate:
    data = {
        "username": username,
        "password": "password1",
        "first_name": "First",
        "last_name": "Last",
        "email": f"{username}@example.com",
    }
    data.update(overrides)
    return UserCreate(**data)


def test_find_all_counts_successful_creates(db_session) -> None:
    assert user_service.find_all_users(db_session) == []
    names = ["carol", "alice", "bob"]
    for name in names:
        user_service.create_user(db_session, _user(name))

    users = user_service.find_all_users(db_session)
    assert len(users) == len(names)
    assert [u.username for u in users] == sorted(names)


def test_duplicate_create_conflicts_and_keeps_first(db_session) -> None:
    user_service.create_user(db_session, _user("dup", first_name="Original"))
    with pytest.raises(ConflictError):
        user_service.create_user(db_session, _user("dup", first_name="Second"))

    assert user_service.find_user_by_username(db_session, "dup").first_name == "Original"
    assert len(user_service.find_all_users(db_session)) == 1


def test_find_by_username_missing(db_session) -> None:
    with pytest.raises(NotFoundError):
        user_service.find_user_by_username(db_session, "nobody")


def test_update_applies_only_supplied_fields(db_session) -> None:
    user_service.create_user(db_session, _user("patchme", photo_url="https://img"))
    updated = user_service.update_user(db_session, "patchme", UserUpdate(last_name="Changed"))

    assert updated.last_name == "Changed"
    assert updated.first_name == "First"
    assert updated.photo_url == "https://img"


def test_update_and_remove_missing_user(db_session) -> None:
    with pytest.raises(NotFoundError):
        user_service.update_user(db_session, "nobody", UserUpdate(first_name="X"))
    with pytest.raises(NotFoundError):
        user_service.remove_user(db_session, "nobody")


def test_remove_user(db_session) -> None:
    user_service.create_user(db_session, _user("gone"))
    user_service.remove_user(db_session, "gone")
    with pytest.raises(NotFoundError):
        user_service.find_user_by_username(db_session, "gone")


def test_update_rejects_explicit_null_for_required_fields() -> None:
    with pytest.raises(ValueError):
        UserUpdate(first_name=None)
