"""User domain: identity, credential rules and the user repository port."""

from todolist.domain.user.aggregates import User
from todolist.domain.user.exceptions import (
    EmailAlreadyExistsError,
    IncorrectPasswordError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidNameError,
    NotOwnProfileError,
    UserNotFoundError,
    WeakPasswordError,
)
from todolist.domain.user.repositories import UserRepository
from todolist.domain.user.value_objects import (
    Email,
    UserName,
    normalize_email,
    validate_password,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "IncorrectPasswordError",
    "InvalidCredentialsError",
    "InvalidEmailError",
    "InvalidNameError",
    "NotOwnProfileError",
    "User",
    "UserName",
    "UserNotFoundError",
    "UserRepository",
    "WeakPasswordError",
    "normalize_email",
    "validate_password",
]
