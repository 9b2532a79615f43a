"""User endpoints."""

from __future__ import annotations

import re

from fastapi import APIRouter, Depends, status

from user_api.dependencies import get_user_create, get_user_service
from user_api.schemas.response import MessageResponse
from user_api.schemas.user import User, UserCreate
from user_api.services.user_service import UserService
from user_api.utils.errors import (
    MISSING_ID_MESSAGE,
    NON_NUMERIC_ID_MESSAGE,
    NotFoundError,
    RouteParameterError,
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_MAX_ID = 2**63 - 1

router = APIRouter()


def parse_user_id(raw: str) -> int:
    """Parse a path id as a signed 64-bit integer."""
    if not raw:
        raise RouteParameterError(MISSING_ID_MESSAGE)
    if not _INTEGER_RE.fullmatch(raw):
        raise RouteParameterError(NON_NUMERIC_ID_MESSAGE)
    value = int(raw)
    if not -_MAX_ID - 1 <= value <= _MAX_ID:
        raise RouteParameterError(NON_NUMERIC_ID_MESSAGE)
    return value


@router.get("/users", response_model=list[User])
def list_users(service: UserService = Depends(get_user_service)) -> list[User]:
    """List every stored user."""
    return service.list_users()


@router.get("/user/", include_in_schema=False)
def get_user_without_id() -> User:
    """Reject lookups that omit the id segment."""
    raise RouteParameterError(MISSING_ID_MESSAGE)


@router.get(
    "/user/{user_id}",
    response_model=User,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> User:
    """Return one user by numeric id."""
    user = service.get_user(parse_user_id(user_id))
    if user is None:
        raise NotFoundError()
    return user


@router.post("/user", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate = Depends(get_user_create),
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a user and return it with its assigned id."""
    return service.create_user(payload)
