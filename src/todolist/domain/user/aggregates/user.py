"""User aggregate."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from todolist.domain.shared.time import utc_now
from todolist.domain.user.value_objects import Email, UserName


class User:
    """
    User aggregate root.

    Holds identity (email, name) and the opaque password hash. The hash is
    only read by the application layer to verify credentials; it is never
    copied into DTOs.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        name: Union[str, UserName],
        password_hash: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._name = name if isinstance(name, UserName) else UserName(name)
        self._password_hash = password_hash
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def name(self) -> str:
        return self._name.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_email(self, email: Union[str, Email]) -> None:
        self._email = email if isinstance(email, Email) else Email(email)
        self._touch()

    def rename(self, name: Union[str, UserName]) -> None:
        self._name = name if isinstance(name, UserName) else UserName(name)
        self._touch()

    def set_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._touch()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        name: Union[str, UserName],
        password_hash: str,
    ) -> "User":
        return cls(email=email, name=name, password_hash=password_hash)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        name: Union[str, UserName],
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            password_hash=password_hash,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
