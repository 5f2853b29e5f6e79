"""Reset password use case"""

import logging

from ...core.security import (
    RESET_TOKEN_TYPE,
    decode_token,
    get_password_hash,
    user_id_from_claims,
)
from ...domain.exceptions import (
    InvalidOrExpiredTokenError,
    InvalidResetTokenError,
    ResetTokenExpiredError,
    TokenExpiredError,
)
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import UserId
from ..dtos.user_dtos import ResetPasswordDto

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """Use case for resetting password with token"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: ResetPasswordDto) -> None:
        """Execute reset password use case"""
        try:
            claims = decode_token(request.token, expected_type=RESET_TOKEN_TYPE)
            user_id = UserId(user_id_from_claims(claims))
        except TokenExpiredError:
            raise ResetTokenExpiredError()
        except (InvalidOrExpiredTokenError, ValueError):
            raise InvalidResetTokenError()

        hashed_password = get_password_hash(request.password)

        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)

            # The stored token must be the exact one supplied: a valid signature
            # alone does not prove it is the latest, unused token for this user
            if not user or not user.reset_token_matches(request.token):
                raise InvalidResetTokenError()

            if user.is_reset_token_expired():
                raise ResetTokenExpiredError()

            user.change_password(hashed_password)
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        logger.info("Password reset completed for user id=%s", user_id)
