"""Service package exports."""

from user_api.services.user_service import UserService

__all__ = ["UserService"]
