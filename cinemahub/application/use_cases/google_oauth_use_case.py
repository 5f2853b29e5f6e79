"""Google OAuth authentication use case"""

import asyncio
import functools
import logging
from typing import Any, Dict

from google.auth.exceptions import TransportError
from google.oauth2 import id_token
from google.auth.transport import requests

from ...domain.entities.user import User
from ...domain.exceptions import ConfigurationError, ExternalServiceUnavailableError, ValidationError
from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import GoogleAuthDto, AuthResultDto, UserSummaryDto
from ...core.security import create_access_token
from ...core.config import settings

logger = logging.getLogger(__name__)


class GoogleOAuthUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def _verify_credential(self, request: GoogleAuthDto) -> None:
        """Check the Google ID token against the account data sent by the client"""
        if not settings.GOOGLE_CLIENT_ID:
            if settings.GOOGLE_REQUIRE_ID_TOKEN:
                raise ConfigurationError("Google OAuth is not configured on the server")
            logger.warning("GOOGLE_CLIENT_ID is not set; Google credential for %s not verified", request.email)
            return

        if not request.credential:
            raise ValidationError("Google ID token is required")

        # Certificate fetch is a blocking HTTP call
        verify = functools.partial(
            id_token.verify_oauth2_token,
            request.credential,
            requests.Request(),
            settings.GOOGLE_CLIENT_ID
        )
        loop = asyncio.get_running_loop()
        try:
            idinfo: Dict[str, Any] = await asyncio.wait_for(
                loop.run_in_executor(None, verify),
                timeout=settings.GOOGLE_VERIFY_TIMEOUT_SECONDS
            )
        except (TransportError, asyncio.TimeoutError) as e:
            logger.warning("Could not reach Google to verify credential for %s: %s", request.email, e)
            raise ExternalServiceUnavailableError("Google sign-in is temporarily unavailable")
        except ValueError as e:
            logger.info("Rejected Google credential for %s: %s", request.email, e)
            raise ValidationError("Invalid Google credential")

        if idinfo.get("sub") != request.google_id or idinfo.get("email") != request.email:
            raise ValidationError("Google credential does not match the supplied account")

    async def execute(self, request: GoogleAuthDto) -> AuthResultDto:
        """Sign in with a Google identity, creating the account on first use"""
        if not request.email or not request.name or not request.google_id:
            raise ValidationError("Missing required Google authentication data")

        if request.credential or settings.GOOGLE_REQUIRE_ID_TOKEN:
            await self._verify_credential(request)

        email = Email(request.email)

        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_email(email)

            if user:
                user.link_google(request.google_id, request.picture)
                user.record_login()
                await self.unit_of_work.users.update(user)
                logger.info("Existing user logged in with Google: %s", email)
            else:
                user = User.create_from_google(
                    email=email,
                    username=request.name,
                    google_id=request.google_id,
                    picture=request.picture
                )
                user.record_login()
                user = await self.unit_of_work.users.add(user)
                logger.info("New Google user created: %s", email)

            await self.unit_of_work.commit()

        token = create_access_token(user.id.value, str(user.email), user.username)
        return AuthResultDto(
            token=token,
            user=UserSummaryDto.from_entity(user, with_provider=True)
        )
