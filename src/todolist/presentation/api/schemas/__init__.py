"""Pydantic schemas for API requests and responses."""

from todolist.presentation.api.schemas.common import (
    CamelModel,
    DataResponse,
    ErrorResponse,
    MessageDataResponse,
    MessageResponse,
)
from todolist.presentation.api.schemas.todos import (
    TodoCreateRequest,
    TodoResponse,
    TodoUpdateRequest,
)
from todolist.presentation.api.schemas.users import (
    ChangeEmailRequest,
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    RegisteredUserResponse,
    RegisterRequest,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "CamelModel",
    "ChangeEmailRequest",
    "ChangePasswordRequest",
    "DataResponse",
    "ErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageDataResponse",
    "MessageResponse",
    "RegisterRequest",
    "RegisteredUserResponse",
    "TodoCreateRequest",
    "TodoResponse",
    "TodoUpdateRequest",
    "UpdateUserRequest",
    "UserResponse",
]
