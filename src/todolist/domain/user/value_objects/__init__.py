from todolist.domain.user.value_objects.email import Email, normalize_email
from todolist.domain.user.value_objects.password import (
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    validate_password,
)
from todolist.domain.user.value_objects.user_name import UserName

__all__ = [
    "MAX_PASSWORD_LENGTH",
    "MIN_PASSWORD_LENGTH",
    "Email",
    "UserName",
    "normalize_email",
    "validate_password",
]
