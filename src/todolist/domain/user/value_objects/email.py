"""Email value object.

Provides validated, normalized email addresses for user identification.
"""

import re
from dataclasses import dataclass

from todolist.domain.user.exceptions import InvalidEmailError

# Shape check only: local@domain.tld
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_EMAIL_LENGTH = 255


def normalize_email(value: str) -> str:
    """Lower-case and trim an email address (idempotent)."""
    return value.strip().lower()


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            msg = "Email is required."
            raise InvalidEmailError(msg)

        normalized = normalize_email(self.value)

        if len(normalized) > MAX_EMAIL_LENGTH:
            msg = f"Email must be {MAX_EMAIL_LENGTH} characters or less."
            raise InvalidEmailError(msg)

        if not EMAIL_PATTERN.match(normalized):
            raise InvalidEmailError

        # Replace value with normalized version (frozen dataclass workaround)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
