"""
Authentication and registration request/response schemas.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """How a registration form error is presented."""
    WARNING = "warning"
    DANGER = "danger"


class FormError(BaseModel):
    """One problem found in a submitted registration form."""
    severity: Severity = Field(..., description="Presentation level")
    message: str = Field(..., description="Human readable message")

    class Config:
        use_enum_values = True


class RegisterForm(BaseModel):
    """Registration form body; missing fields are reported as form errors."""
    name: Optional[str] = Field(None, description="First name")
    surname: Optional[str] = Field(None, description="Last name")
    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Password")
    password_repeated: Optional[str] = Field(None, description="Password confirmation")

    def inputs(self) -> dict[str, Optional[str]]:
        """Fields echoed back to the form after a failed submission."""
        return {"name": self.name, "surname": self.surname, "email": self.email}


class RegisterResponse(BaseModel):
    """Successful registration; the user is logged in straight away."""
    user_id: str = Field(..., description="Created user ID")
    email: str = Field(..., description="Registered email")
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class RegisterErrorResponse(BaseModel):
    """Rejected registration with the errors and the submitted inputs."""
    errors: list[FormError] = Field(..., description="Form errors in display order")
    inputs: dict[str, Optional[str]] = Field(..., description="Submitted inputs")


class LoginRequest(BaseModel):
    """Login request body."""
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token expiration time in seconds")
    email: str = Field(..., description="Authenticated user email")
