"""
Generic collection operations built on the connection gateway.
"""
import logging
from typing import Any, Callable, Optional

from socialnet.database.connections import ConnectionGateway
from socialnet.database.results import StoreResult


class CollectionStore:
    """Read and clear any named collection."""

    def __init__(self, gateway: ConnectionGateway, logger: Optional[logging.Logger] = None):
        self.gateway = gateway
        self.logger = logger or logging.getLogger(__name__)

    async def clear(self, collection: str) -> StoreResult:
        """
        Delete every record of a collection.

        Clearing an already empty collection succeeds like any other clear.
        """
        async def _clear(db):
            await db[collection].delete_many({})
            self.logger.info(f"The collection {collection} has been cleared")

        return await self.gateway.with_connection(
            _clear, description=f"clear the collection {collection}"
        )

    async def get(self, collection: str, query: dict[str, Any]) -> StoreResult:
        """
        Retrieve every record of a collection matching a filter.

        Args:
            collection: Collection to read
            query: MongoDB filter document

        Returns:
            StoreResult holding the list of matching documents (possibly empty)
        """
        async def _find(db):
            return await db[collection].find(query).to_list(length=None)

        return await self.gateway.with_connection(
            _find, description=f"query the collection {collection}"
        )

    async def cb_get(
        self,
        collection: str,
        query: dict[str, Any],
        callback: Callable[[Optional[list[dict[str, Any]]]], Any],
    ) -> None:
        """Callback flavour of ``get``: ``callback(None)`` on failure."""
        result = await self.get(collection, query)
        callback(None if result.failed else result.value)
