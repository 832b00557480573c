"""
Request and response schemas for API endpoints.
"""
from socialnet.schemas.auth import (
    FormError,
    LoginRequest,
    LoginResponse,
    RegisterErrorResponse,
    RegisterForm,
    RegisterResponse,
    Severity,
)
from socialnet.schemas.seed import SeedData, SeedUser
from socialnet.schemas.user import UserResponse

__all__ = [
    # Auth
    "FormError",
    "LoginRequest",
    "LoginResponse",
    "RegisterErrorResponse",
    "RegisterForm",
    "RegisterResponse",
    "Severity",
    # Seed
    "SeedData",
    "SeedUser",
    # User
    "UserResponse",
]
