"""User preferences use cases"""

from ...domain.entities.user import User
from ...domain.exceptions import UserNotFoundError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import UserId
from ..dtos.user_dtos import PreferencesDto, UpdatePreferencesDto


class UserPreferencesUseCases:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def _get_user(self, user_id: UserId) -> User:
        user = await self.unit_of_work.users.get_by_id(user_id)
        if not user:
            raise UserNotFoundError()
        return user

    async def get_preferences(self, user_id: UserId) -> PreferencesDto:
        async with self.unit_of_work:
            user = await self._get_user(user_id)
            return PreferencesDto.from_entity(user.preferences)

    async def update_preferences(self, user_id: UserId, request: UpdatePreferencesDto) -> PreferencesDto:
        """Update favourite genres, language or notification setting"""
        async with self.unit_of_work:
            user = await self._get_user(user_id)
            user.preferences.update(
                favorite_genres=request.favorite_genres,
                language=request.language,
                notifications=request.notifications
            )
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()
            return PreferencesDto.from_entity(user.preferences)
