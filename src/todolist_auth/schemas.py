"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        The unique identifier of the user
    email
        The user's email address at the time the token was issued
    exp
        Token expiration timestamp
    token_type
        Always "access" for tokens issued by this service
    """

    user_id: UUID
    email: str
    exp: datetime
    token_type: str

    def is_access_token(self) -> bool:
        """Check if this is an access token."""
        return self.token_type == "access"
