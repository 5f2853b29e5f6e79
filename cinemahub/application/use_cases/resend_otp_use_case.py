"""Resend verification code use case"""

from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.email_service import EmailService
from ...application.dtos.user_dtos import EmailOnlyDto
from ...application.services.otp_issuer import OtpIssuer


class ResendOtpUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, email_service: EmailService):
        self.unit_of_work = unit_of_work
        self.email_service = email_service

    async def execute(self, request: EmailOnlyDto) -> None:
        """Issue a new code, replacing the pending one.

        The verified flag is not checked: a verified account gets a fresh
        pending code too.
        """
        email = Email(request.email)

        async with self.unit_of_work:
            code, _ = await OtpIssuer(self.unit_of_work.users).issue(email)
            await self.unit_of_work.commit()

        await self.email_service.send_verification_code(str(email), code, resend=True)
