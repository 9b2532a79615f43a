"""FastAPI dependency injection helpers."""

from __future__ import annotations

from fastapi import Depends, Request
from pydantic import ValidationError
from sqlalchemy.engine import Engine

from user_api.db.user_repository import UserRepository
from user_api.schemas.user import UserCreate
from user_api.services.user_service import UserService
from user_api.utils.errors import ClientInputError


def get_engine(request: Request) -> Engine:
    """Return the engine owned by the running application."""
    engine = request.app.state.engine
    if engine is None:
        raise RuntimeError("Database engine is not initialized")
    return engine


def get_user_service(engine: Engine = Depends(get_engine)) -> UserService:
    """Wire repository and service around the shared engine."""
    return UserService(UserRepository(engine))


async def get_user_create(request: Request) -> UserCreate:
    """Decode the request body as a user payload, whatever its Content-Type.

    Raises:
        ClientInputError: 400 if the body is not JSON or lacks a required field.
    """
    body = await request.body()
    try:
        return UserCreate.model_validate_json(body)
    except ValidationError as exc:
        detail = exc.errors()
        message = detail[0].get("msg", "Invalid request") if detail else "Invalid request"
        raise ClientInputError(message) from exc
