"""Password policy.

One canonical policy for every path that accepts a new password
(registration, profile update, password change).
"""

from todolist.domain.user.exceptions import WeakPasswordError

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128


def validate_password(password: str | None) -> str:
    """Return the password unchanged if it satisfies the policy.

    Raises
    ------
    WeakPasswordError
        If the password is empty, too short or too long
    """
    if not password:
        msg = "Password is required."
        raise WeakPasswordError(msg)

    if len(password) < MIN_PASSWORD_LENGTH:
        msg = f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
        raise WeakPasswordError(msg)

    if len(password) > MAX_PASSWORD_LENGTH:
        msg = f"Password cannot exceed {MAX_PASSWORD_LENGTH} characters."
        raise WeakPasswordError(msg)

    return password
