"""Generic response bodies."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Single human-readable message."""

    message: str
