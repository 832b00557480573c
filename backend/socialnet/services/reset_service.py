"""
Database reset: clear the users collection and reload the seed users.
"""
import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

from pydantic import ValidationError

from socialnet.core.security import PasswordEncryptor
from socialnet.database.collections import Collections
from socialnet.database.store import CollectionStore
from socialnet.database.user_repository import UserRepository
from socialnet.models.user import User
from socialnet.schemas.seed import SeedData

SeedLoader = Callable[[], Any]


class SeedDataError(RuntimeError):
    """The seed data could not be read or does not have the expected shape."""


def file_seed_loader(path: str | Path) -> SeedLoader:
    """Seed loader reading a JSON file on every call."""
    def _load() -> Any:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    return _load


@dataclass
class ResetSummary:
    """What a reset did once every insert has settled."""
    cleared: bool
    inserted: int = 0
    failed: int = 0


class DatabaseReset:
    """Reseeds the users collection."""

    def __init__(
        self,
        store: CollectionStore,
        users: UserRepository,
        encrypt: PasswordEncryptor,
        load_seed: SeedLoader,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.users = users
        self.encrypt = encrypt
        self.load_seed = load_seed
        self.logger = logger or logging.getLogger(__name__)

    def _read_seed(self) -> SeedData:
        try:
            return SeedData.model_validate(self.load_seed())
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise SeedDataError(f"Invalid seed data: {e}") from e

    async def reset(self) -> ResetSummary:
        """
        Clear the users collection and insert the seed users with hashed
        passwords.

        The seed is read before anything is cleared, so malformed seed data
        leaves the collection untouched. Clear-then-insert is not atomic:
        readers may see the collection empty or partially filled meanwhile.

        Returns:
            ResetSummary, available only after every insert has finished

        Raises:
            SeedDataError: If the seed data is missing or malformed
        """
        self.logger.info("Reset of the database invoked")
        seed = self._read_seed()

        cleared = await self.store.clear(Collections.USERS)
        if cleared.failed:
            return ResetSummary(cleared=False)

        seed_users = [
            User(
                name=entry.name,
                surname=entry.surname,
                email=entry.email,
                password_hash=self.encrypt(entry.password),
                friends=entry.friends,
                role=entry.role,
            )
            for entry in seed.users
        ]
        results = await asyncio.gather(*(self.users.insert_user(user) for user in seed_users))

        inserted = sum(1 for result in results if result.ok)
        summary = ResetSummary(cleared=True, inserted=inserted, failed=len(results) - inserted)
        self.logger.info(
            f"Database reset complete: {summary.inserted} users inserted, {summary.failed} failed"
        )
        return summary
