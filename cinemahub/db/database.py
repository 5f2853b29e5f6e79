"""Process-local user store

Stands in for a database: user records live in a dict keyed by id. Every unit
of work holds ``lock`` for its whole block, so a find-then-mutate sequence on
a record cannot interleave with another request.
"""

import asyncio
import logging
from datetime import datetime
from typing import Dict, Optional

from ..domain.entities.user import User, utcnow

logger = logging.getLogger(__name__)


class InMemoryDatabase:

    def __init__(self):
        self.users: Dict[int, User] = {}
        self.lock = asyncio.Lock()
        self._next_id = 1

    def next_id(self) -> int:
        """Allocate the next user id"""
        user_id = self._next_id
        self._next_id += 1
        return user_id

    def reset(self) -> None:
        """Drop all records (used on startup and by tests)"""
        self.users.clear()
        self.lock = asyncio.Lock()
        self._next_id = 1

    async def prune_expired(self, now: Optional[datetime] = None) -> int:
        """Clear expired verification codes and reset tokens"""
        now = now or utcnow()
        async with self.lock:
            pruned = sum(1 for user in self.users.values() if user.prune_expired(now))
        if pruned:
            logger.info("Pruned expired codes/tokens on %d user(s)", pruned)
        return pruned

    async def prune_periodically(self, interval_seconds: float) -> None:
        """Prune every ``interval_seconds`` until the task is cancelled"""
        while True:
            await asyncio.sleep(interval_seconds)
            await self.prune_expired()


database = InMemoryDatabase()


def get_database() -> InMemoryDatabase:
    """Dependency to get the user store."""
    return database
