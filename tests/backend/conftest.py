"""
Backend-specific test fixtures and configuration.

These fixtures wire the gateway, stores and services to the in-memory
MongoDB and provide an HTTP client with the app dependencies overridden.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from pymongo.errors import ServerSelectionTimeoutError

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Client Doubles
# =============================================================================

class TrackingClient:
    """
    Stand-in for a Motor client built by the gateway.

    Databases are served by the shared mongomock-motor client so data
    survives across operations; the admin ping always answers and every
    ``close()`` is counted.
    """

    def __init__(self, mongo_client):
        self.mongo_client = mongo_client
        self.admin = MagicMock()
        self.admin.command = AsyncMock(return_value={"ok": 1.0})
        self.close_calls = 0

    def __getitem__(self, name):
        if name == "admin":
            return self.admin
        return self.mongo_client[name]

    def close(self):
        self.close_calls += 1


class ClientFactory:
    """Records every client the gateway opens."""

    def __init__(self, build):
        self.build = build
        self.clients = []

    def __call__(self, *args, **kwargs):
        client = self.build()
        self.clients.append(client)
        return client

    @property
    def opened(self) -> int:
        return len(self.clients)

    @property
    def closed(self) -> int:
        return sum(client.close_calls for client in self.clients)


# =============================================================================
# Gateway Fixtures
# =============================================================================

@pytest.fixture
def client_factory(mock_async_mongo_client):
    """Factory handing out tracking clients over the mock database."""
    return ClientFactory(lambda: TrackingClient(mock_async_mongo_client))


@pytest_asyncio.fixture
async def gateway(test_settings, mock_logger, client_factory, mock_social_db):
    """Connection gateway over the mock database (unique email index in place)."""
    from socialnet.database.connections import ConnectionGateway

    return ConnectionGateway(test_settings, logger=mock_logger, client_factory=client_factory)


@pytest.fixture
def unreachable_client_factory(mock_async_mongo_client):
    """Factory whose clients fail the connect ping."""
    def _build():
        client = TrackingClient(mock_async_mongo_client)
        client.admin.command = AsyncMock(
            side_effect=ServerSelectionTimeoutError("mongodb://test:27017: connection refused")
        )
        return client

    return ClientFactory(_build)


@pytest.fixture
def unreachable_gateway(test_settings, mock_logger, unreachable_client_factory):
    """Gateway for a database that cannot be reached."""
    from socialnet.database.connections import ConnectionGateway

    return ConnectionGateway(
        test_settings, logger=mock_logger, client_factory=unreachable_client_factory
    )


# =============================================================================
# Store and Service Fixtures
# =============================================================================

@pytest.fixture
def store(gateway, mock_logger):
    from socialnet.database.store import CollectionStore

    return CollectionStore(gateway, logger=mock_logger)


@pytest.fixture
def user_repository(gateway, store, mock_logger):
    from socialnet.database.user_repository import UserRepository

    return UserRepository(gateway, store=store, logger=mock_logger)


@pytest.fixture
def unreachable_user_repository(unreachable_gateway, mock_logger):
    from socialnet.database.user_repository import UserRepository

    return UserRepository(unreachable_gateway, logger=mock_logger)


@pytest.fixture
def registration_service(user_repository, encrypt, mock_logger):
    from socialnet.services.registration_service import RegistrationService

    return RegistrationService(user_repository, encrypt, logger=mock_logger)


@pytest.fixture
def auth_service(user_repository, encrypt, mock_logger):
    from socialnet.services.auth_service import AuthService

    return AuthService(user_repository, encrypt, logger=mock_logger)


@pytest.fixture
def database_reset(store, user_repository, encrypt, mock_logger, seed_data):
    """DatabaseReset reading the in-memory seed data."""
    from socialnet.services.reset_service import DatabaseReset

    return DatabaseReset(
        store, user_repository, encrypt, load_seed=lambda: seed_data, logger=mock_logger
    )


# =============================================================================
# App Override Helpers
# =============================================================================

@pytest.fixture
def app_with_mocks(test_settings, gateway):
    """
    The FastAPI app with settings and gateway overridden.

    The lifespan is not run; the mock database fixture creates the indexes.
    """
    from socialnet.config import get_settings
    from socialnet.dependencies.services import get_gateway
    from socialnet.main import app

    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_gateway] = lambda: gateway
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app_with_mocks):
    """
    Create an async test client.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app_with_mocks),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def token_for(test_settings):
    """Helper issuing a valid access token for an email."""
    from socialnet.core.security import create_access_token

    def _token(email: str) -> str:
        return create_access_token(email, settings=test_settings)

    return _token
