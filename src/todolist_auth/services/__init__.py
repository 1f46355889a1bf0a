"""Authentication services.

Provides password hashing and JWT token management.
"""

from todolist_auth.services.jwt_service import JWTService
from todolist_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
    "JWTService",
]
