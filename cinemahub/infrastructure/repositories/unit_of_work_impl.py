"""Unit of Work implementation over the in-memory store"""

from ...db.database import InMemoryDatabase
from ...domain.repositories.unit_of_work import IUnitOfWork
from .user_repository_impl import UserRepositoryImpl


class UnitOfWorkImpl(IUnitOfWork):

    def __init__(self, database: InMemoryDatabase):
        self.database = database
        self.users = UserRepositoryImpl(database)
        self._committed = False

    async def __aenter__(self):
        await self.database.lock.acquire()
        self.users = UserRepositoryImpl(self.database)
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type:
                await self.rollback()
            elif not self._committed:
                await self.commit()
        finally:
            self.database.lock.release()

    async def commit(self) -> None:
        """Commit transaction"""
        self.users.flush()
        self._committed = True

    async def rollback(self) -> None:
        """Rollback transaction"""
        self.users.discard()
