"""API router package."""

from user_api.routers import users

__all__ = ["users"]
