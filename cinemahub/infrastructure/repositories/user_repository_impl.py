"""User repository implementation over the in-memory store"""

import copy
from typing import Dict, Optional

from ...db.database import InMemoryDatabase
from ...domain.entities.user import User
from ...domain.exceptions import DuplicateEmailError
from ...domain.repositories.user_repository import IUserRepository
from ...domain.value_objects.email import Email
from ...domain.value_objects.entity_ids import UserId


class UserRepositoryImpl(IUserRepository):
    """Repository implementation for User aggregate.

    Loaded users are private copies tracked in an identity map; nothing reaches
    the shared store until ``flush`` is called by the unit of work.
    """

    def __init__(self, database: InMemoryDatabase):
        self.database = database
        self._tracked: Dict[int, User] = {}

    def _track(self, user: User) -> User:
        self._tracked[user.id.value] = user
        return user

    def _load(self, user_id: int) -> Optional[User]:
        if user_id in self._tracked:
            return self._tracked[user_id]
        stored = self.database.users.get(user_id)
        if stored is None:
            return None
        return self._track(copy.deepcopy(stored))

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """Get user by ID"""
        return self._load(user_id.value)

    async def get_by_email(self, email: Email) -> Optional[User]:
        """Get user by email"""
        for user in self._tracked.values():
            if user.email == email:
                return user
        for user_id, stored in self.database.users.items():
            if stored.email == email:
                return self._load(user_id)
        return None

    async def exists_by_email(self, email: Email) -> bool:
        """Check if user exists by email"""
        return await self.get_by_email(email) is not None

    async def add(self, user: User) -> User:
        """Add a new user"""
        if await self.exists_by_email(user.email):
            raise DuplicateEmailError()
        user.id = UserId(self.database.next_id())
        return self._track(user)

    async def update(self, user: User) -> User:
        """Update an existing user"""
        return self._track(user)

    def flush(self) -> None:
        """Write tracked users back to the store"""
        for user_id, user in self._tracked.items():
            self.database.users[user_id] = copy.deepcopy(user)

    def discard(self) -> None:
        self._tracked.clear()
