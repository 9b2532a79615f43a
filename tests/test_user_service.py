"""User service tests with a stub repository."""

from __future__ import annotations

import pytest

from user_api.schemas.user import User, UserCreate
from user_api.services.user_service import UserService
from user_api.utils.errors import StorageError


class StubRepository:
    def __init__(self, users: list[User] | None = None, next_id: int = 7) -> None:
        self.users = users or []
        self.next_id = next_id
        self.created: list[UserCreate] = []

    def list(self) -> list[User]:
        return list(self.users)

    def create(self, candidate: UserCreate) -> int:
        self.created.append(candidate)
        return self.next_id

    def get_by_id(self, user_id: int) -> User | None:
        return next((user for user in self.users if user.id == user_id), None)


class FailingRepository(StubRepository):
    def create(self, candidate: UserCreate) -> int:
        raise StorageError("duplicate key value violates unique constraint")


def test_create_user_stamps_assigned_id() -> None:
    repo = StubRepository(next_id=41)
    candidate = UserCreate(name="Jane", email="jane@example.com", img_url=None)

    user = UserService(repo).create_user(candidate)

    assert user == User(id=41, name="Jane", email="jane@example.com", img_url=None)
    assert repo.created == [candidate]


def test_create_user_propagates_storage_error() -> None:
    with pytest.raises(StorageError, match="duplicate key"):
        UserService(FailingRepository()).create_user(
            UserCreate(name="Jane", email="jane@example.com")
        )


def test_list_and_get_pass_through() -> None:
    jane = User(id=1, name="Jane", email="jane@example.com")
    service = UserService(StubRepository(users=[jane]))

    assert service.list_users() == [jane]
    assert service.get_user(1) == jane
    assert service.get_user(2) is None
