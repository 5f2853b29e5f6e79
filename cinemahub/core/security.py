"""Security utilities: password hashing, one-time codes and JWTs"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt, JWTError, ExpiredSignatureError
from passlib.context import CryptContext

from .config import settings
from ..domain.exceptions import ConfigurationError, InvalidOrExpiredTokenError, TokenExpiredError

logger = logging.getLogger(__name__)

DEV_FALLBACK_SECRET_KEY = "cinemahub-dev-secret-key-change-in-production"

ACCESS_TOKEN_TYPE = "access"
RESET_TOKEN_TYPE = "reset"

# Password context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

_fallback_secret_warned = False


def get_password_hash(password: str) -> str:
    """Hash password"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify password; accounts without a local password never match"""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def get_secret_key() -> str:
    """Return the JWT signing key.

    Outside development a missing SECRET_KEY is a hard error. In development the
    fallback constant is used and a warning is logged the first time.
    """
    global _fallback_secret_warned

    if settings.SECRET_KEY:
        return settings.SECRET_KEY

    if not settings.is_development:
        raise ConfigurationError(
            f"SECRET_KEY must be set when ENVIRONMENT={settings.ENVIRONMENT!r}"
        )

    if not _fallback_secret_warned:
        logger.warning(
            "SECRET_KEY is not set; using the development fallback key. "
            "This is unsafe for production, set SECRET_KEY in your .env file."
        )
        _fallback_secret_warned = True
    return DEV_FALLBACK_SECRET_KEY


def _encode(claims: Dict[str, Any], expires_delta: timedelta) -> str:
    now = datetime.now(timezone.utc)
    to_encode = dict(claims)
    to_encode.update({"iat": now, "exp": now + expires_delta})
    return jwt.encode(to_encode, get_secret_key(), algorithm=settings.ALGORITHM)


def create_access_token(
    user_id: int,
    email: str,
    username: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a session token carrying the user's identity claims"""
    if expires_delta is None:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)

    claims = {"sub": str(user_id), "email": email, "type": ACCESS_TOKEN_TYPE}
    if username:
        claims["username"] = username
    return _encode(claims, expires_delta)


def create_reset_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """Create a password reset token.

    The ``jti`` makes every token unique, so a token issued later always
    supersedes an earlier one even within the same second.
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.RESET_TOKEN_EXPIRE_MINUTES)

    claims = {
        "sub": str(user_id),
        "type": RESET_TOKEN_TYPE,
        "jti": secrets.token_urlsafe(16),
    }
    return _encode(claims, expires_delta)


def decode_token(token: str, expected_type: Optional[str] = None) -> Dict[str, Any]:
    """Verify a token and return its claims"""
    try:
        payload = jwt.decode(token, get_secret_key(), algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError as e:
        raise TokenExpiredError("Token has expired") from e
    except JWTError as e:
        raise InvalidOrExpiredTokenError() from e

    if payload.get("sub") is None:
        raise InvalidOrExpiredTokenError()
    if expected_type is not None and payload.get("type") != expected_type:
        raise InvalidOrExpiredTokenError()
    return payload


def user_id_from_claims(claims: Dict[str, Any]) -> int:
    try:
        return int(claims["sub"])
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidOrExpiredTokenError() from e


def generate_otp() -> str:
    """Generate a uniformly random 6-digit code (100000-999999)"""
    return str(100000 + secrets.randbelow(900000))


def dummy_verify() -> None:
    """Spend the same time as a real password check (unknown accounts)"""
    pwd_context.dummy_verify()
