"""
Seed data schema read by the database reset.
"""
from typing import Optional

from pydantic import BaseModel, Field


class SeedUser(BaseModel):
    """A seed user; the password is plaintext until the reset hashes it."""
    name: str
    surname: str
    email: str
    password: str = Field(..., min_length=1)
    friends: list[str] = Field(default_factory=list)
    role: Optional[str] = None


class SeedData(BaseModel):
    """Top-level seed file structure."""
    users: list[SeedUser]
