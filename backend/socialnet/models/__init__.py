"""
Pydantic models for database documents.
"""
from socialnet.models.user import User, UserRole

__all__ = [
    "User",
    "UserRole",
]
