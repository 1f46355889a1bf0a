"""Shared domain building blocks."""

from todolist.domain.shared.exceptions import (
    AuthenticationFailedError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ErrorKind,
    FaultError,
    InvalidInputError,
    RecordVanishedError,
)
from todolist.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "AuthenticationFailedError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ErrorKind",
    "FaultError",
    "InvalidInputError",
    "RecordVanishedError",
    "ensure_tz_aware",
    "utc_now",
]
