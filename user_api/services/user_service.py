"""User use cases."""

from __future__ import annotations

from typing import Protocol

from user_api.schemas.user import User, UserCreate


class UserStore(Protocol):
    """Data access operations the service depends on."""

    def list(self) -> list[User]: ...

    def create(self, candidate: UserCreate) -> int: ...

    def get_by_id(self, user_id: int) -> User | None: ...


class UserService:
    """Pass-through to the repository.

    The only logic here is stamping the store-assigned id onto a newly
    created user so callers do not need to fetch it again. Repository
    errors propagate unchanged.
    """

    def __init__(self, repository: UserStore) -> None:
        self.repository = repository

    def list_users(self) -> list[User]:
        return self.repository.list()

    def create_user(self, candidate: UserCreate) -> User:
        user_id = self.repository.create(candidate)
        return User(id=user_id, **candidate.model_dump())

    def get_user(self, user_id: int) -> User | None:
        return self.repository.get_by_id(user_id)
