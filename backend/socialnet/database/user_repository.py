"""
User persistence on top of the generic collection store.
"""
import logging
from typing import Any, Optional

from pydantic import ValidationError

from socialnet.database.collections import Collections
from socialnet.database.connections import ConnectionGateway
from socialnet.database.results import FailureKind, StoreResult
from socialnet.database.store import CollectionStore
from socialnet.models.user import User, UserRole


class UserRepository:
    """Insert and query users."""

    def __init__(
        self,
        gateway: ConnectionGateway,
        store: Optional[CollectionStore] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.gateway = gateway
        self.logger = logger or logging.getLogger(__name__)
        self.store = store or CollectionStore(gateway, logger=self.logger)

    async def insert_user(self, user: User) -> StoreResult:
        """
        Insert one user.

        Email uniqueness is checked by the registration validator and
        enforced by the unique index on ``email``; a rejected insert comes
        back as a DUPLICATE failure.

        Args:
            user: User to insert (its ``id`` is ignored)

        Returns:
            StoreResult holding the new user id as a string
        """
        async def _insert(db):
            result = await db[Collections.USERS].insert_one(user.to_document())
            return str(result.inserted_id)

        result = await self.gateway.with_connection(
            _insert, description=f"insert the user {user.email}"
        )
        if result.ok:
            self.logger.info(f"New user inserted in the database: {user.email} ({result.value})")
        return result

    async def get_users(self, criterion: dict[str, Any]) -> StoreResult:
        """
        Retrieve the users matching a filter.

        A stored document that does not fit the User model fails the whole
        read with QUERY.

        Returns:
            StoreResult holding a list of User (possibly empty)
        """
        result = await self.store.get(Collections.USERS, criterion)
        try:
            return result.map(lambda documents: [User.from_document(doc) for doc in documents])
        except ValidationError as e:
            self.logger.error(f"Unable to read the users matching {criterion}: {e}")
            return StoreResult.failure(FailureKind.QUERY)

    async def visible_users(self, current_email: str) -> StoreResult:
        """Users listed to ``current_email``: everyone but themself and admins."""
        return await self.get_users({
            "email": {"$ne": current_email},
            "role": {"$ne": UserRole.ADMIN.value},
        })
