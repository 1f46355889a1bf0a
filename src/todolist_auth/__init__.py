"""Todolist Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the todo domain. It handles:
- Password hashing (bcrypt)
- JWT access token creation and verification

Architecture:
    todolist_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from todolist_auth import PasswordHashingService, JWTService
"""

from todolist_auth.exceptions import AuthError, InvalidTokenError
from todolist_auth.schemas import TokenPayload
from todolist_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
]
