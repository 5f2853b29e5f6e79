"""Update user avatar use case"""

from ...domain.exceptions import UserNotFoundError
from ...domain.value_objects.entity_ids import UserId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import AvatarDto, UpdateAvatarDto

DEFAULT_AVATAR_URL = "https://via.placeholder.com/150"


class UpdateUserAvatarUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UserId, request: UpdateAvatarDto) -> AvatarDto:
        """Store the avatar URL; a placeholder is used when none is given"""
        avatar_url = request.avatar_url or DEFAULT_AVATAR_URL

        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)
            if not user:
                raise UserNotFoundError()

            user.set_avatar(avatar_url)
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        return AvatarDto(avatar=avatar_url)
