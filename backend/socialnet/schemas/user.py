"""
User response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field

from socialnet.models.user import User


class UserResponse(BaseModel):
    """User information response (excludes the password hash)."""
    id: Optional[str] = Field(None, description="User ID")
    name: str = Field(..., description="First name")
    surname: str = Field(..., description="Last name")
    email: str = Field(..., description="User email")
    friends: list[str] = Field(default_factory=list, description="Friend user ids")

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            surname=user.surname,
            email=user.email,
            friends=user.friends,
        )
