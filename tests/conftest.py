"""Global pytest configuration and fixtures."""

# Standard library imports
import os
from typing import Dict, List

# Cheap hashing and a fixed signing key; must be set before cinemahub is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENVIRONMENT", "development")

# Third-party imports
import pytest
from fastapi.testclient import TestClient

# Local imports
from cinemahub.api.dependencies import get_email_service
from cinemahub.application.dtos.user_dtos import RegisterUserDto, VerifyOtpDto
from cinemahub.application.use_cases.register_user import RegisterUserUseCase
from cinemahub.application.use_cases.verify_otp_use_case import VerifyOtpUseCase
from cinemahub.db.database import database
from cinemahub.infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl
from cinemahub.main import app


class FakeEmailService:
    """Captures outgoing codes and reset tokens instead of sending them."""

    def __init__(self):
        self.codes: Dict[str, List[str]] = {}
        self.reset_tokens: Dict[str, List[str]] = {}

    async def send_verification_code(self, to_email: str, code: str, resend: bool = False) -> bool:
        self.codes.setdefault(to_email, []).append(code)
        return True

    async def send_password_reset_email(self, to_email: str, reset_token: str) -> bool:
        self.reset_tokens.setdefault(to_email, []).append(reset_token)
        return True

    def last_code(self, email: str) -> str:
        return self.codes[email][-1]

    def last_reset_token(self, email: str) -> str:
        return self.reset_tokens[email][-1]


@pytest.fixture(autouse=True)
def fresh_database():
    """Every test starts with an empty user store."""
    database.reset()
    yield database
    database.reset()


@pytest.fixture
def unit_of_work(fresh_database) -> UnitOfWorkImpl:
    return UnitOfWorkImpl(fresh_database)


@pytest.fixture
def email_service() -> FakeEmailService:
    return FakeEmailService()


@pytest.fixture
def register_verified(unit_of_work, email_service):
    """Register and verify an account, returning the verification result."""

    async def _register(email: str = "alice@example.com", name: str = "alice", password: str = "secret1"):
        await RegisterUserUseCase(unit_of_work, email_service).execute(
            RegisterUserDto(email=email, name=name, password=password)
        )
        return await VerifyOtpUseCase(unit_of_work).execute(
            VerifyOtpDto(email=email, otp=email_service.last_code(email))
        )

    return _register


@pytest.fixture
def client(email_service):
    """API client with email delivery captured by the fake service."""
    app.dependency_overrides[get_email_service] = lambda: email_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client, email_service):
    """Bearer headers for a registered and verified account."""
    client.post("/api/auth/register", json={
        "email": "viewer@example.com",
        "name": "viewer",
        "password": "secret1",
    })
    response = client.post("/api/auth/verify-otp", json={
        "email": "viewer@example.com",
        "otp": email_service.last_code("viewer@example.com"),
    })
    token = response.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}
