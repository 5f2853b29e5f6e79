"""Tests for code normalization and the OTP issuer."""

from datetime import timedelta

import pytest

from cinemahub.application.services.otp_issuer import OtpIssuer, normalize_code
from cinemahub.domain.entities.user import User, utcnow
from cinemahub.domain.exceptions import CodeExpiredError, CodeMismatchError, UserNotFoundError
from cinemahub.domain.value_objects.email import Email


@pytest.mark.parametrize("value, expected", [
    ("123456", "123456"),
    (123456, "123456"),
    (" 654321 ", "654321"),
    ("12345", None),
    ("1234567", None),
    ("12a456", None),
    (True, None),
    (None, None),
])
def test_normalize_code(value, expected):
    assert normalize_code(value) == expected


class TestOtpIssuer:

    @pytest.mark.asyncio
    async def test_issue_overwrites_pending_code(self, unit_of_work):
        email = Email("alice@example.com")
        async with unit_of_work:
            await unit_of_work.users.add(User.create(email, "alice", "hashed"))
            issuer = OtpIssuer(unit_of_work.users)

            first, _ = await issuer.issue(email)
            second, expires_at = await issuer.issue(email)

            user = await unit_of_work.users.get_by_email(email)
            assert user.otp == second
            assert timedelta(minutes=9) < expires_at - utcnow() <= timedelta(minutes=10)

            if first != second:
                with pytest.raises(CodeMismatchError):
                    await issuer.verify(email, first)

            verified = await issuer.verify(email, second)
            assert verified.is_verified

    @pytest.mark.asyncio
    async def test_mismatch_is_checked_before_expiry(self, unit_of_work):
        email = Email("alice@example.com")
        async with unit_of_work:
            user = await unit_of_work.users.add(User.create(email, "alice", "hashed"))
            user.set_otp("123456", utcnow() - timedelta(minutes=1))
            issuer = OtpIssuer(unit_of_work.users)

            with pytest.raises(CodeMismatchError):
                await issuer.verify(email, "654321")
            with pytest.raises(CodeExpiredError):
                await issuer.verify(email, "123456")

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_of_work):
        async with unit_of_work:
            with pytest.raises(UserNotFoundError):
                await OtpIssuer(unit_of_work.users).issue(Email("ghost@example.com"))
