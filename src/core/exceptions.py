"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_ID = "INVALID_ID"
    INVALID_EMAIL = "INVALID_EMAIL"

    # Conflict errors, reported as 400
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"

    # Method not allowed (405)
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class UserNotFoundError(AppException):
    """User not found."""

    def __init__(self, user_id: int | str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {user_id}",
            status_code=404,
            details={"id": user_id},
        )


class InvalidUserIdError(AppException):
    """The ``id`` query parameter is missing or not a valid user id."""

    def __init__(self, raw_id: str | None) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_ID,
            message="invalid id",
            status_code=400,
            details={"id": raw_id},
        )


class InvalidEmailError(AppException):
    """Email does not look like local@domain.tld."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_EMAIL,
            message="invalid email",
            status_code=400,
            details={"email": email},
        )


class EmailAlreadyExistsError(AppException):
    """Another user already holds this email."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.EMAIL_ALREADY_EXISTS,
            message="email already exists",
            status_code=400,
            details={"email": email},
        )


class StorageError(AppException):
    """The data layer failed; the cause is logged, never returned."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message="Internal Server Error",
            status_code=500,
        )
