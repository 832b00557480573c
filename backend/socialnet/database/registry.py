"""
Index management.
Ensures the collection indexes exist on startup.
"""
from socialnet.database.collections import Collections
from socialnet.database.connections import ConnectionGateway
from socialnet.database.results import StoreResult


async def create_indexes(gateway: ConnectionGateway) -> StoreResult:
    """Create the indexes declared in ``Collections.INDEXES``."""

    async def _create(db):
        for collection_name, indexes in Collections.INDEXES.items():
            collection = db[collection_name]
            for index_def in indexes:
                keys = index_def["keys"]
                kwargs = {k: v for k, v in index_def.items() if k != "keys"}
                await collection.create_index(keys, **kwargs)

    return await gateway.with_connection(_create, description="create the indexes")
