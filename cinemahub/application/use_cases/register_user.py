"""Register user use case"""

import logging

from ...domain.entities.user import User
from ...domain.exceptions import DuplicateEmailError
from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.email_service import EmailService
from ...application.dtos.user_dtos import RegisterUserDto, UserSummaryDto
from ...application.services.otp_issuer import OtpIssuer
from ...core.security import get_password_hash

logger = logging.getLogger(__name__)


class RegisterUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, email_service: EmailService):
        self.unit_of_work = unit_of_work
        self.email_service = email_service

    async def execute(self, request: RegisterUserDto) -> UserSummaryDto:
        email = Email(request.email)
        hashed_password = get_password_hash(request.password)

        async with self.unit_of_work:
            if await self.unit_of_work.users.exists_by_email(email):
                raise DuplicateEmailError()

            user = User.create(
                email=email,
                username=request.name,
                hashed_password=hashed_password
            )
            user = await self.unit_of_work.users.add(user)

            code, _ = await OtpIssuer(self.unit_of_work.users).issue(email)
            await self.unit_of_work.commit()

        logger.info("Registered user %s (id=%s)", email, user.id)

        # Delivery failures are logged by the email service and never fail registration
        await self.email_service.send_verification_code(str(email), code)

        return UserSummaryDto.from_entity(user)
