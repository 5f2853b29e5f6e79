"""One-time passcode issuing and checking for email verification"""

import re
from datetime import datetime, timedelta
from typing import Optional, Tuple, Union

from ...core.config import settings
from ...core.security import generate_otp
from ...domain.entities.user import User, utcnow
from ...domain.exceptions import CodeExpiredError, CodeMismatchError, UserNotFoundError
from ...domain.repositories.user_repository import IUserRepository
from ...domain.value_objects.email import Email

_CODE_RE = re.compile(r"^\d{6}$")


def normalize_code(code: Union[str, int, None]) -> Optional[str]:
    """Return the code as a 6-digit string, or None if it cannot be one"""
    if code is None or isinstance(code, bool):
        return None
    text = str(code).strip()
    return text if _CODE_RE.match(text) else None


class OtpIssuer:
    """Issues and checks codes on user records.

    Works on the repository of an already-open unit of work; the caller owns
    the transaction.
    """

    def __init__(self, users: IUserRepository):
        self.users = users

    async def _get_user(self, email: Email) -> User:
        user = await self.users.get_by_email(email)
        if not user:
            raise UserNotFoundError()
        return user

    async def issue(self, email: Email) -> Tuple[str, datetime]:
        """Generate a fresh code for the user, overwriting any pending one"""
        user = await self._get_user(email)
        code = generate_otp()
        expires_at = utcnow() + timedelta(minutes=settings.OTP_EXPIRE_MINUTES)
        user.set_otp(code, expires_at)
        await self.users.update(user)
        return code, expires_at

    async def verify(self, email: Email, supplied_code: Union[str, int]) -> User:
        """Check the code and mark the user verified"""
        user = await self._get_user(email)

        code = normalize_code(supplied_code)
        if code is None or not user.otp_matches(code):
            raise CodeMismatchError()

        if user.is_otp_expired():
            raise CodeExpiredError()

        user.mark_verified()
        await self.users.update(user)
        return user
