"""
Connection-per-operation access to MongoDB.

Every call opens its own client, runs one operation against the configured
database and closes the client again. Driver failures are logged here and
turned into a failed ``StoreResult``; they never reach the caller as
exceptions.
"""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from socialnet.config import Settings, get_settings
from socialnet.database.results import FailureKind, StoreResult

Operation = Callable[[AsyncIOMotorDatabase], Awaitable[Any]]
ClientFactory = Callable[..., AsyncIOMotorClient]


class ConnectionGateway:
    """Opens one MongoDB connection per operation and always releases it."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        logger: Optional[logging.Logger] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        self.settings = settings or get_settings()
        self.logger = logger or logging.getLogger(__name__)
        self.client_factory = client_factory or AsyncIOMotorClient

    async def _connect(self) -> Optional[AsyncIOMotorClient]:
        """
        Open a client and force a round-trip to the server.

        Returns:
            Connected client, or None if the database could not be reached
            within the configured timeout
        """
        timeout = self.settings.mongo_connect_timeout_seconds
        client = None
        try:
            client = self.client_factory(
                self.settings.mongo_uri,
                serverSelectionTimeoutMS=int(timeout * 1000),
            )
            await asyncio.wait_for(client["admin"].command("ping"), timeout=timeout)
            return client
        except (PyMongoError, asyncio.TimeoutError) as e:
            self.logger.error(f"Unable to connect to the database: {e!r}")
            if client is not None:
                client.close()
            return None

    async def with_connection(
        self,
        operation: Operation,
        description: str = "run the database operation",
    ) -> StoreResult:
        """
        Run ``operation`` against a freshly opened database connection.

        Args:
            operation: Coroutine function receiving the database handle
            description: What the operation does, used in the failure log line

        Returns:
            StoreResult holding the operation's return value, or the
            failure kind (connect, duplicate key, other driver error)
        """
        client = await self._connect()
        if client is None:
            return StoreResult.failure(FailureKind.CONNECT)

        try:
            value = await operation(client[self.settings.mongo_database_name])
        except DuplicateKeyError as e:
            self.logger.error(f"Unable to {description}: duplicate key ({e})")
            return StoreResult.failure(FailureKind.DUPLICATE)
        except PyMongoError as e:
            self.logger.error(f"Unable to {description}: {e}")
            return StoreResult.failure(FailureKind.QUERY)
        finally:
            client.close()

        return StoreResult.success(value)

    async def ping(self) -> StoreResult:
        """Check that the database answers; connecting already pings the server."""
        async def _connected(db):
            return True

        return await self.with_connection(_connected, description="ping the database")
