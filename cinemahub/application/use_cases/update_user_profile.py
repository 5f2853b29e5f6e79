"""Update user profile use case"""

from ...domain.exceptions import UserNotFoundError
from ...domain.value_objects.entity_ids import UserId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import UpdateProfileDto, UserSummaryDto


class UpdateUserProfileUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UserId, request: UpdateProfileDto) -> UserSummaryDto:
        """Update user profile"""
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)

            if not user:
                raise UserNotFoundError()

            user.rename(request.name)

            # Save changes
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

            return UserSummaryDto.from_entity(user)
