"""
Global test fixtures for socialnet.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Test settings with a fast password hash
- Seed data files
- Test user factories
"""

import json
import logging
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

TEST_DB_NAME = "socialnet_test"


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at the mock database, with cheap hashing and short timeouts."""
    from socialnet.config import Settings

    return Settings(
        mongo_uri="mongodb://test:27017",
        mongo_database_name=TEST_DB_NAME,
        mongo_connect_timeout_seconds=0.05,
        seed_data_path=str(tmp_path / "defaultdb.json"),
        password_salt="test-salt",
        password_rounds=1000,
        jwt_secret_key="test-secret",
    )


@pytest.fixture
def encrypt(test_settings):
    """The password hash function injected into the services."""
    from socialnet.core.security import make_encryptor

    return make_encryptor(test_settings)


@pytest.fixture
def mock_logger():
    """Logger double recording info/error calls."""
    return MagicMock(spec=logging.Logger)


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient

    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_social_db(mock_async_mongo_client):
    """Provide the mock socialnet database with the unique email index."""
    db = mock_async_mongo_client[TEST_DB_NAME]
    # Create indexes like the real app
    await db.users.create_index("email", unique=True)
    yield db


# =============================================================================
# Seed Data Fixtures
# =============================================================================

@pytest.fixture
def seed_data() -> dict:
    """Seed data with one admin and two regular users."""
    return {
        "users": [
            {
                "name": "Admin",
                "surname": "Admin",
                "email": "admin@email.com",
                "password": "admin",
                "role": "ADMIN",
            },
            {"name": "Ann", "surname": "Lee", "email": "a@x.com", "password": "pw1"},
            {"name": "Pedro", "surname": "Diaz", "email": "pedro@email.com", "password": "123456"},
        ]
    }


@pytest.fixture
def seed_file(test_settings, seed_data) -> Path:
    """Write the seed data where the settings expect it."""
    path = Path(test_settings.seed_data_path)
    path.write_text(json.dumps(seed_data), encoding="utf-8")
    return path


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def register_form_data() -> dict:
    """A registration form that passes every check."""
    return {
        "name": "Maria",
        "surname": "Lopez",
        "email": "maria@example.com",
        "password": "secret",
        "password_repeated": "secret",
    }


@pytest.fixture
def make_user(encrypt):
    """Factory for User models with a hashed password."""
    from socialnet.models.user import User

    def _make(email: str = "testuser@example.com", password: str = "secret", **fields):
        values = {"name": "Test", "surname": "User", "email": email}
        values.update(fields)
        return User(password_hash=encrypt(password), **values)

    return _make
