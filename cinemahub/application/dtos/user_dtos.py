"""User and auth DTOs for API layer"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Any, Generic, List, Optional, TypeVar, Union
from datetime import datetime

from ..services.otp_issuer import normalize_code
from ...domain.entities.user import User
from ...domain.entities.user_preferences import UserPreferences

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope returned by every endpoint"""
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    errors: Optional[List[Any]] = None
    error: Optional[str] = None


class RegisterUserDto(BaseModel):
    """DTO for user registration"""
    email: EmailStr
    name: str = Field(..., min_length=3)
    password: str = Field(..., min_length=6)


class VerifyOtpDto(BaseModel):
    """DTO for email verification with a one-time code"""
    email: EmailStr
    otp: Union[str, int]

    @field_validator("otp", mode="before")
    @classmethod
    def otp_must_be_six_digits(cls, value):
        code = normalize_code(value)
        if code is None:
            raise ValueError("OTP must be 6 digits")
        return code


class EmailOnlyDto(BaseModel):
    """DTO for resend-otp and forgot-password requests"""
    email: EmailStr


class LoginUserDto(BaseModel):
    """DTO for user login"""
    email: EmailStr
    password: str = Field(..., min_length=1)


class ResetPasswordDto(BaseModel):
    """DTO for reset password request"""
    token: str = Field(..., min_length=1)
    password: str = Field(..., min_length=6)


class GoogleAuthDto(BaseModel):
    """DTO for Google sign-in; fields are checked by the use case"""
    email: Optional[EmailStr] = None
    name: Optional[str] = None
    google_id: Optional[str] = Field(None, alias="googleId")
    picture: Optional[str] = None
    credential: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class UpdateProfileDto(BaseModel):
    name: str = Field(..., min_length=3)


class UserSummaryDto(BaseModel):
    """Public user fields; never carries password or code material"""
    id: int
    email: str
    username: str
    picture: Optional[str] = None
    auth_provider: Optional[str] = Field(None, alias="authProvider")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, user: User, with_provider: bool = False) -> 'UserSummaryDto':
        summary = cls(id=user.id.value, email=str(user.email), username=user.username)
        if with_provider:
            summary.picture = user.picture
            summary.auth_provider = user.auth_provider.value
        return summary


class AuthResultDto(BaseModel):
    token: str
    user: UserSummaryDto


class ProfileDto(BaseModel):
    id: int
    email: str
    username: str
    is_verified: bool = Field(..., alias="isVerified")
    auth_provider: str = Field(..., alias="authProvider")
    picture: Optional[str] = None
    watchlist_count: int = Field(..., alias="watchlistCount")
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)


class GoogleStatusDto(BaseModel):
    is_configured: bool = Field(..., alias="isConfigured")
    client_id: Optional[str] = Field(None, alias="clientId")

    model_config = ConfigDict(populate_by_name=True)


class PreferencesDto(BaseModel):
    favorite_genres: List[str] = Field(default_factory=list, alias="favoriteGenres")
    language: str
    notifications: bool

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, preferences: UserPreferences) -> 'PreferencesDto':
        return cls(
            favorite_genres=list(preferences.favorite_genres),
            language=preferences.language,
            notifications=preferences.notifications,
        )


class UpdatePreferencesDto(BaseModel):
    """Only the supplied preferences change"""
    favorite_genres: Optional[List[str]] = Field(None, alias="favoriteGenres")
    language: Optional[str] = Field(None, max_length=10)
    notifications: Optional[bool] = None

    model_config = ConfigDict(populate_by_name=True)


class UpdateAvatarDto(BaseModel):
    avatar_url: Optional[str] = Field(None, alias="avatarUrl", max_length=2048)

    model_config = ConfigDict(populate_by_name=True)


class AvatarDto(BaseModel):
    avatar: str


class UserStatsDto(BaseModel):
    watchlist_count: int = Field(..., alias="watchlistCount")
    favorite_genres: List[str] = Field(..., alias="favoriteGenres")
    member_since: datetime = Field(..., alias="memberSince")
    total_movies_watched: int = Field(..., alias="totalMoviesWatched")
    average_rating: float = Field(..., alias="averageRating")

    model_config = ConfigDict(populate_by_name=True)
