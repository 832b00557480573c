"""
User model for the users collection.
"""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """Role tags the application acts on; other tags are stored as-is."""
    ADMIN = "ADMIN"


class User(BaseModel):
    """
    User document model for the MongoDB users collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="First name")
    surname: str = Field(..., description="Last name")
    email: str = Field(..., description="Unique email address, used as login")
    password_hash: str = Field(..., min_length=1, description="Hashed password")
    friends: list[str] = Field(
        default_factory=list,
        description="Ids of the users this user is friends with"
    )
    role: Optional[str] = Field(None, description="Role tag, absent for regular users")

    class Config:
        populate_by_name = True
        use_enum_values = True

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "User":
        """Build a User from a raw MongoDB document."""
        doc = dict(document)
        if "_id" in doc:
            doc["_id"] = str(doc["_id"])
        doc["friends"] = [str(friend) for friend in doc.get("friends", [])]
        return cls(**doc)

    def to_document(self) -> dict[str, Any]:
        """Document ready for insertion (the database assigns ``_id``)."""
        return self.model_dump(exclude={"id"}, exclude_none=True)
