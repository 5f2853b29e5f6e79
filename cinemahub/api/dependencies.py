"""API dependencies for DDD architecture"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from ..core.security import ACCESS_TOKEN_TYPE, decode_token, user_id_from_claims
from ..db.database import InMemoryDatabase, get_database
from ..domain.entities.user import User
from ..domain.exceptions import (
    AuthenticationRequiredError,
    InvalidOrExpiredTokenError,
    UserNotFoundError,
)
from ..domain.repositories.unit_of_work import IUnitOfWork
from ..domain.value_objects.entity_ids import UserId
from ..infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl
from ..infrastructure.external_services.email_service import EmailService


security = HTTPBearer(auto_error=False)


def get_unit_of_work(database: InMemoryDatabase = Depends(get_database)) -> IUnitOfWork:
    """Get unit of work"""
    return UnitOfWorkImpl(database)


def get_email_service() -> EmailService:
    """Get email service"""
    return EmailService()


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
) -> User:
    """Get current authenticated user from the bearer token"""
    if credentials is None or not credentials.credentials:
        raise AuthenticationRequiredError()

    claims = decode_token(credentials.credentials, expected_type=ACCESS_TOKEN_TYPE)
    try:
        user_id = UserId(user_id_from_claims(claims))
    except ValueError:
        raise InvalidOrExpiredTokenError()

    async with unit_of_work:
        user = await unit_of_work.users.get_by_id(user_id)

    if not user:
        raise UserNotFoundError()
    return user
