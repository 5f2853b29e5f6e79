"""Email verification with a one-time code"""

import logging

from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import VerifyOtpDto, AuthResultDto, UserSummaryDto
from ...application.services.otp_issuer import OtpIssuer
from ...core.security import create_access_token

logger = logging.getLogger(__name__)


class VerifyOtpUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: VerifyOtpDto) -> AuthResultDto:
        """Verify the code, mark the account verified and sign the user in"""
        email = Email(request.email)

        async with self.unit_of_work:
            user = await OtpIssuer(self.unit_of_work.users).verify(email, request.otp)
            await self.unit_of_work.commit()

        logger.info("Email verified for user %s", email)

        token = create_access_token(user.id.value, str(user.email), user.username)
        return AuthResultDto(token=token, user=UserSummaryDto.from_entity(user))
