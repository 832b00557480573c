"""
Registration form validation and user sign-up.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional

from socialnet.core.security import PasswordEncryptor
from socialnet.database.results import FailureKind
from socialnet.database.user_repository import UserRepository
from socialnet.models.user import User
from socialnet.schemas.auth import FormError, RegisterForm, Severity

MIN_FIELD_LENGTH = 3

NAME_TOO_SHORT = "The name can't be less than three characters long"
SURNAME_TOO_SHORT = "The surname can't be less than three characters long"
EMAIL_INVALID = "The entered email is not valid"
PASSWORDS_MISMATCH = "The passwords do not match"
PASSWORD_INSECURE = "This password is not secure enough"
EMAIL_IN_USE = "The entered email is already in use"
EMAIL_UNVERIFIED = "The email could not be verified, please try again later"
REGISTRATION_FAILED = "The registration could not be completed, please try again later"


def _too_short(value: Optional[str]) -> bool:
    return not value or len(value) < MIN_FIELD_LENGTH


class RegistrationValidator:
    """Checks a registration form, including email uniqueness."""

    def __init__(self, users: UserRepository):
        self.users = users

    def check_fields(self, form: RegisterForm) -> list[FormError]:
        """Synchronous field checks, in display order."""
        errors = []
        if _too_short(form.name):
            errors.append(FormError(severity=Severity.WARNING, message=NAME_TOO_SHORT))
        if _too_short(form.surname):
            errors.append(FormError(severity=Severity.WARNING, message=SURNAME_TOO_SHORT))
        if _too_short(form.email):
            errors.append(FormError(severity=Severity.WARNING, message=EMAIL_INVALID))
        if not form.password or not form.password_repeated or form.password != form.password_repeated:
            errors.append(FormError(severity=Severity.WARNING, message=PASSWORDS_MISMATCH))
        # Reported even when the mismatch above already fired
        if _too_short(form.password):
            errors.append(FormError(severity=Severity.DANGER, message=PASSWORD_INSECURE))
        return errors

    async def validate(self, form: RegisterForm) -> list[FormError]:
        """
        Validate a registration form.

        The uniqueness lookup is started before the field checks run and
        its outcome is always appended after them. A lookup that fails is
        reported as an error instead of passing the email as unique.

        Args:
            form: Submitted registration form

        Returns:
            Form errors in display order; empty when the form is valid
        """
        lookup = asyncio.create_task(self.users.get_users({"email": form.email}))

        errors = self.check_fields(form)

        result = await lookup
        if result.failed:
            errors.append(FormError(severity=Severity.DANGER, message=EMAIL_UNVERIFIED))
        elif not result.is_empty:
            errors.append(FormError(severity=Severity.WARNING, message=EMAIL_IN_USE))
        return errors


@dataclass
class RegistrationOutcome:
    """Result of a sign-up attempt: the stored user or the form errors."""
    errors: list[FormError] = field(default_factory=list)
    user: Optional[User] = None

    @property
    def succeeded(self) -> bool:
        return self.user is not None


class RegistrationService:
    """Service for signing up new users."""

    def __init__(
        self,
        users: UserRepository,
        encrypt: PasswordEncryptor,
        logger: Optional[logging.Logger] = None,
    ):
        self.users = users
        self.encrypt = encrypt
        self.validator = RegistrationValidator(users)
        self.logger = logger or logging.getLogger(__name__)

    async def register(self, form: RegisterForm) -> RegistrationOutcome:
        """
        Validate the form and store the new user.

        Two concurrent sign-ups with the same email can both pass
        validation; the unique email index lets only one insert through and
        the other is reported as "already in use".
        """
        errors = await self.validator.validate(form)
        if errors:
            return RegistrationOutcome(errors=errors)

        user = User(
            name=form.name,
            surname=form.surname,
            email=form.email,
            password_hash=self.encrypt(form.password),
            friends=[],
        )
        result = await self.users.insert_user(user)

        if result.error == FailureKind.DUPLICATE:
            return RegistrationOutcome(
                errors=[FormError(severity=Severity.WARNING, message=EMAIL_IN_USE)]
            )
        if result.failed:
            return RegistrationOutcome(
                errors=[FormError(severity=Severity.DANGER, message=REGISTRATION_FAILED)]
            )

        user.id = result.value
        self.logger.info(f"The user {user.email} has registered")
        return RegistrationOutcome(user=user)
