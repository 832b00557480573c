"""
Service layer for business logic.
"""
from socialnet.services.auth_service import AuthFailure, AuthService
from socialnet.services.registration_service import (
    RegistrationOutcome,
    RegistrationService,
    RegistrationValidator,
)
from socialnet.services.reset_service import DatabaseReset, ResetSummary, SeedDataError

__all__ = [
    "AuthFailure",
    "AuthService",
    "RegistrationOutcome",
    "RegistrationService",
    "RegistrationValidator",
    "DatabaseReset",
    "ResetSummary",
    "SeedDataError",
]
