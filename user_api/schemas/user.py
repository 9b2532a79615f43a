"""User-related schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Payload accepted when creating a user.

    Any ``user_id`` sent by the client is dropped; the store assigns it.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    name: str
    email: str
    img_url: str | None = None


class User(BaseModel):
    """Public user representation."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = Field(default=None, alias="user_id")
    name: str
    email: str
    img_url: str | None = None
