"""Application configuration"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    # API Configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "CinemaHub"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Movie catalog API with watchlists and email OTP sign-up"

    # Security
    SECRET_KEY: Optional[str] = Field(default=None)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = Field(default=7)
    RESET_TOKEN_EXPIRE_MINUTES: int = Field(default=60)
    OTP_EXPIRE_MINUTES: int = Field(default=10)
    PRUNE_INTERVAL_SECONDS: float = Field(default=300.0, ge=0)
    BCRYPT_ROUNDS: int = Field(default=12, ge=4, le=31)

    # Google OAuth
    GOOGLE_CLIENT_ID: Optional[str] = Field(default=None)
    GOOGLE_CLIENT_SECRET: Optional[str] = Field(default=None)
    GOOGLE_REQUIRE_ID_TOKEN: bool = Field(default=False)
    GOOGLE_VERIFY_TIMEOUT_SECONDS: float = Field(default=10.0)

    # Email SMTP Configuration (OTP codes are logged when unset)
    SMTP_HOST: str = Field(default="smtp.gmail.com")
    SMTP_PORT: int = Field(default=587)
    SMTP_USERNAME: Optional[str] = Field(default=None)
    SMTP_PASSWORD: Optional[str] = Field(default=None)
    SMTP_USE_TLS: bool = Field(default=True)
    SMTP_TIMEOUT_SECONDS: float = Field(default=10.0)
    FROM_EMAIL: str = Field(default="noreply@cinemahub.com")
    FROM_NAME: str = Field(default="CinemaHub")

    # CORS
    ALLOWED_HOSTS: list[str] = Field(default=["http://localhost:3000"])

    # Application URLs
    FRONTEND_URL: str = Field(default="http://localhost:3000")

    # Development
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")
    ENVIRONMENT: str = Field(default="development")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        env_ignore_empty=True,
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    @property
    def email_configured(self) -> bool:
        return bool(self.SMTP_USERNAME and self.SMTP_PASSWORD)

    @property
    def google_configured(self) -> bool:
        return bool(self.GOOGLE_CLIENT_ID and self.GOOGLE_CLIENT_SECRET)


settings = Settings()
