"""Shared domain exceptions, error kinds and error codes.

Every domain exception carries exactly one ``ErrorKind``. The presentation
layer maps kinds to HTTP status codes through a single total mapping, so
adding a new exception never requires touching the boundary unless it
introduces a new kind.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """The user-facing failure categories of the system."""

    INVALID_INPUT = "invalid_input"
    AUTHENTICATION_FAILED = "authentication_failed"
    NOT_FOUND = "not_found"
    FAULT = "fault"


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Invalid input (400)
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_EMAIL = "INVALID_EMAIL"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    INVALID_NAME = "INVALID_NAME"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    INVALID_TODO = "INVALID_TODO"

    # Authentication failed (401)
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NOT_OWN_PROFILE = "NOT_OWN_PROFILE"
    INCORRECT_PASSWORD = "INCORRECT_PASSWORD"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Not found (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    TODO_NOT_FOUND = "TODO_NOT_FOUND"
    ENDPOINT_NOT_FOUND = "ENDPOINT_NOT_FOUND"

    # Faults (500)
    RECORD_VANISHED = "RECORD_VANISHED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    kind: ErrorKind = ErrorKind.FAULT

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class InvalidInputError(DomainException):
    """Malformed or missing fields and policy violations."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_INPUT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class AuthenticationFailedError(DomainException):
    """Bad credentials, or acting on another user's resource."""

    kind = ErrorKind.AUTHENTICATION_FAILED

    def __init__(
        self,
        message: str = "Authentication required",
        code: ErrorCode = ErrorCode.AUTHENTICATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found (or is not visible)."""

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class FaultError(DomainException):
    """Store or infrastructure failure that is not the caller's fault."""

    kind = ErrorKind.FAULT

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class RecordVanishedError(FaultError):
    """A scoped write matched no row although a probe just found it."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(
            f"{entity} {entity_id} disappeared during the operation",
            ErrorCode.RECORD_VANISHED,
            {"entity": entity, "id": str(entity_id)},
        )
