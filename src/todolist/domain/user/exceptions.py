"""User domain exceptions.

Custom exceptions for the user domain, used for validation, credential
checks and business rule violations.
"""

from todolist.domain.shared.exceptions import (
    AuthenticationFailedError,
    EntityNotFoundError,
    ErrorCode,
    InvalidInputError,
)


class InvalidEmailError(InvalidInputError):
    """Raised when email format is invalid."""

    def __init__(self, message: str = "Please provide a valid email address.") -> None:
        super().__init__(message, ErrorCode.INVALID_EMAIL)


class WeakPasswordError(InvalidInputError):
    """Raised when a password doesn't meet the password policy."""

    def __init__(self, message: str = "Password does not meet requirements.") -> None:
        super().__init__(message, ErrorCode.WEAK_PASSWORD)


class InvalidNameError(InvalidInputError):
    """Raised when a display name is too short or too long."""

    def __init__(
        self,
        message: str = "Name must be at least 2 characters long.",
    ) -> None:
        super().__init__(message, ErrorCode.INVALID_NAME)


class EmailAlreadyExistsError(InvalidInputError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "A user with this email already exists.",
            ErrorCode.EMAIL_ALREADY_EXISTS,
            {"email": email},
        )


class InvalidCredentialsError(AuthenticationFailedError):
    """Unknown email or wrong password on login.

    The message is the same for both cases so a caller cannot probe
    which emails are registered.
    """

    def __init__(self) -> None:
        super().__init__("Invalid credentials.", ErrorCode.INVALID_CREDENTIALS)


class NotOwnProfileError(AuthenticationFailedError):
    """The acting user targeted another user's account."""

    def __init__(self, action: str = "update") -> None:
        super().__init__(
            f"You can only {action} your own profile.",
            ErrorCode.NOT_OWN_PROFILE,
        )


class IncorrectPasswordError(AuthenticationFailedError):
    """Current password did not verify on a sensitive change."""

    def __init__(self) -> None:
        super().__init__(
            "Current password is incorrect.",
            ErrorCode.INCORRECT_PASSWORD,
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: object = None) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found.",
            ErrorCode.USER_NOT_FOUND,
            {"user_id": str(user_id)} if user_id is not None else None,
        )
