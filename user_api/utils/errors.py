"""Custom exception hierarchy for the user API."""

from __future__ import annotations

MISSING_ID_MESSAGE = "Essa rota espera receber um id como parâmetro"
NON_NUMERIC_ID_MESSAGE = "Essa rota espera receber um id numérico"
USER_NOT_FOUND_MESSAGE = "Nenhum usuário foi localizado com o id fornecido"


class AppError(Exception):
    """Base application error carrying its HTTP status."""

    # Key under which ``message`` is exposed in the response body.
    body_key = "error"

    def __init__(self, message: str, status_code: int = 400) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        """Serialize the error in the API standard shape."""
        return {self.body_key: self.message}


class ClientInputError(AppError):
    """Raised for request payload or parameter issues."""

    def __init__(self, reason: str) -> None:
        super().__init__(message=reason, status_code=400)


class RouteParameterError(ClientInputError):
    """Raised when a path parameter is missing or malformed."""

    body_key = "message"


class NotFoundError(AppError):
    """Raised when a requested resource does not exist."""

    body_key = "message"

    def __init__(self, message: str = USER_NOT_FOUND_MESSAGE) -> None:
        super().__init__(message=message, status_code=404)


class StorageError(AppError):
    """Raised when the relational store rejects or fails a statement.

    The underlying driver message is passed through to the client verbatim.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(message=reason, status_code=500)
