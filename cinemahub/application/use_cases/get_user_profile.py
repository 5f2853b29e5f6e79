"""Get user profile use case"""

from ...domain.exceptions import UserNotFoundError
from ...domain.value_objects.entity_ids import UserId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import ProfileDto


class GetUserProfileUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UserId) -> ProfileDto:
        """Get user profile by ID"""
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)

            if not user:
                raise UserNotFoundError()

            return ProfileDto(
                id=user.id.value,
                email=str(user.email),
                username=user.username,
                is_verified=user.is_verified,
                auth_provider=user.auth_provider.value,
                picture=user.picture,
                watchlist_count=len(user.watchlist),
                created_at=user.created_at
            )
