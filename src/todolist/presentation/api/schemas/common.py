"""Common schemas shared across API endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    success: bool = Field(default=False)
    message: str = Field(..., description="Error message")
    code: str = Field(..., description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "message": "User not found.",
                "code": "USER_NOT_FOUND",
            },
        },
    )


class MessageResponse(BaseModel):
    """Success envelope carrying only a confirmation message."""

    success: bool = Field(default=True)
    message: str


class DataResponse(BaseModel, Generic[T]):
    """Success envelope carrying a payload."""

    success: bool = Field(default=True)
    data: T


class MessageDataResponse(BaseModel, Generic[T]):
    """Success envelope carrying a confirmation message and a payload."""

    success: bool = Field(default=True)
    message: str
    data: T
