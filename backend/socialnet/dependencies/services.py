"""
Service providers for route dependencies.

Every provider is a FastAPI dependency so tests can swap any layer through
``app.dependency_overrides``.
"""
from fastapi import Depends

from socialnet.config import Settings, get_settings
from socialnet.core.security import PasswordEncryptor, make_encryptor
from socialnet.database.connections import ConnectionGateway
from socialnet.database.store import CollectionStore
from socialnet.database.user_repository import UserRepository
from socialnet.services.auth_service import AuthService
from socialnet.services.registration_service import RegistrationService
from socialnet.services.reset_service import DatabaseReset, file_seed_loader


def get_gateway(settings: Settings = Depends(get_settings)) -> ConnectionGateway:
    """Dependency to get the connection gateway."""
    return ConnectionGateway(settings)


def get_encryptor(settings: Settings = Depends(get_settings)) -> PasswordEncryptor:
    """Dependency to get the password hash function."""
    return make_encryptor(settings)


def get_user_repository(gateway: ConnectionGateway = Depends(get_gateway)) -> UserRepository:
    """Dependency to get UserRepository instance."""
    return UserRepository(gateway)


def get_auth_service(
    users: UserRepository = Depends(get_user_repository),
    encrypt: PasswordEncryptor = Depends(get_encryptor),
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(users, encrypt)


def get_registration_service(
    users: UserRepository = Depends(get_user_repository),
    encrypt: PasswordEncryptor = Depends(get_encryptor),
) -> RegistrationService:
    """Dependency to get RegistrationService instance."""
    return RegistrationService(users, encrypt)


def get_database_reset(
    settings: Settings = Depends(get_settings),
    gateway: ConnectionGateway = Depends(get_gateway),
    users: UserRepository = Depends(get_user_repository),
    encrypt: PasswordEncryptor = Depends(get_encryptor),
) -> DatabaseReset:
    """Dependency to get DatabaseReset instance."""
    return DatabaseReset(
        CollectionStore(gateway),
        users,
        encrypt,
        file_seed_loader(settings.seed_data_path),
    )
