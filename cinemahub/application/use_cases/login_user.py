"""Login user use case"""

import logging

from ...domain.enums import UserStatus
from ...domain.exceptions import InvalidCredentialsError, NotVerifiedError, UserNotFoundError
from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import LoginUserDto, AuthResultDto, UserSummaryDto
from ...core.security import verify_password, dummy_verify, create_access_token

logger = logging.getLogger(__name__)


class LoginUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: LoginUserDto) -> AuthResultDto:
        email = Email(request.email)

        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_email(email)

        # bcrypt runs outside the store lock
        if not user:
            dummy_verify()
            logger.info("Login failed for %s: unknown email", email)
            raise InvalidCredentialsError()

        if not verify_password(request.password, user.hashed_password):
            logger.info("Login failed for %s: wrong password", email)
            raise InvalidCredentialsError()

        if user.status == UserStatus.PENDING_VERIFICATION:
            raise NotVerifiedError()

        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user.id)
            if not user:
                raise UserNotFoundError()
            user.record_login()
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        logger.info("Login successful for user %s", email)

        token = create_access_token(user.id.value, str(user.email), user.username)
        return AuthResultDto(token=token, user=UserSummaryDto.from_entity(user))
