"""Forgot password use case"""

import logging
from datetime import timedelta

from ..dtos.user_dtos import EmailOnlyDto
from ...core.config import settings
from ...core.security import create_reset_token
from ...domain.entities.user import utcnow
from ...domain.exceptions import UserNotFoundError
from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.email_service import EmailService

logger = logging.getLogger(__name__)


class ForgotPasswordUseCase:
    """Use case for handling forgot password requests"""

    def __init__(self, unit_of_work: IUnitOfWork, email_service: EmailService):
        self.unit_of_work = unit_of_work
        self.email_service = email_service

    async def execute(self, request: EmailOnlyDto) -> None:
        """Store a fresh reset token on the user and mail the reset link"""
        email = Email(request.email)

        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_email(email)
            if not user:
                raise UserNotFoundError()

            reset_token = create_reset_token(user.id.value)
            expires_at = utcnow() + timedelta(minutes=settings.RESET_TOKEN_EXPIRE_MINUTES)

            # Overwrites any earlier token, which can no longer be used
            user.set_reset_token(reset_token, expires_at)
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        logger.info("Password reset requested for %s", email)

        # Even if email fails, the token is stored, so the request still succeeds
        await self.email_service.send_password_reset_email(str(email), reset_token)
