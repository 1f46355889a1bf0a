"""User account schemas for request/response models.

Request fields are deliberately loose (optional strings): the credential
rules live in the domain so that every entry point applies the same
policy and the same messages.
"""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict

from todolist.application.dtos import LoginResultDTO, UserDTO
from todolist.presentation.api.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    """Request schema for user registration."""

    email: str | None = None
    password: str | None = None
    name: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
                "name": "Jane Doe",
            },
        },
    )


class LoginRequest(CamelModel):
    """Request schema for user login."""

    email: str | None = None
    password: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
            },
        },
    )


class UpdateUserRequest(CamelModel):
    """Partial profile update; omitted fields stay unchanged."""

    email: str | None = None
    name: str | None = None
    password: str | None = None


class ChangePasswordRequest(CamelModel):
    current_password: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "currentPassword": "securepassword123",
                "password": "evenmoresecure456",
            },
        },
    )


class ChangeEmailRequest(CamelModel):
    new_email: str
    current_password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "newEmail": "new@example.com",
                "currentPassword": "securepassword123",
            },
        },
    )


class RegisteredUserResponse(CamelModel):
    """Response schema for a freshly registered user."""

    id: UUID
    email: str
    name: str
    created_at: datetime

    @classmethod
    def from_dto(cls, dto: UserDTO) -> "RegisteredUserResponse":
        return cls(id=dto.id, email=dto.email, name=dto.name, created_at=dto.created_at)


class UserResponse(RegisteredUserResponse):
    """Response schema for user data."""

    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: UserDTO) -> "UserResponse":
        return cls(
            id=dto.id,
            email=dto.email,
            name=dto.name,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class LoginResponse(CamelModel):
    """Bearer token plus the authenticated user."""

    token: str
    expires_in: int
    user: UserResponse

    @classmethod
    def from_dto(cls, dto: LoginResultDTO) -> "LoginResponse":
        return cls(
            token=dto.access_token,
            expires_in=dto.expires_in,
            user=UserResponse.from_dto(dto.user),
        )
