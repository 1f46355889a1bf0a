"""Display name value object."""

from dataclasses import dataclass

from todolist.domain.user.exceptions import InvalidNameError

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100


@dataclass(frozen=True)
class UserName:
    """A trimmed display name of 2..100 characters."""

    value: str

    def __post_init__(self) -> None:
        trimmed = (self.value or "").strip()

        if len(trimmed) < MIN_NAME_LENGTH:
            raise InvalidNameError

        if len(trimmed) > MAX_NAME_LENGTH:
            msg = f"Name must be {MAX_NAME_LENGTH} characters or less."
            raise InvalidNameError(msg)

        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value
