# File: app/core/errors.py

"""
Error taxonomy for the API.

Services and the access guard raise these typed errors; the exception
handlers registered in app.main translate them into HTTP responses.
Nothing below the route layer raises HTTPException directly.
"""

from fastapi import status


class ConfigurationError(RuntimeError):
    """Fatal startup error: a required setting is missing or unsafe."""


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class UserNotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "User not found"


class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Invalid credentials"


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Unauthorized"


class RecordNotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Record not found"


class InvalidTokenError(Exception):
    """Raised by the token verifier. Never reaches the client as-is."""


class ExpiredTokenError(InvalidTokenError):
    pass
