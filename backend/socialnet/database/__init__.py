"""
Database module - connection-per-operation gateway and MongoDB stores.
"""
from socialnet.database.collections import Collections
from socialnet.database.connections import ConnectionGateway
from socialnet.database.results import FailureKind, StoreResult
from socialnet.database.store import CollectionStore
from socialnet.database.user_repository import UserRepository

__all__ = [
    "Collections",
    "ConnectionGateway",
    "FailureKind",
    "StoreResult",
    "CollectionStore",
    "UserRepository",
]
