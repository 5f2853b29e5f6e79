"""User entity with business logic"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, List
import hmac

from ..value_objects.email import Email
from ..value_objects.entity_ids import UserId
from ..enums import AuthProvider, UserStatus
from ..exceptions import WatchlistItemExistsError, WatchlistItemNotFoundError
from .watchlist_item import WatchlistItem
from .user_preferences import UserPreferences


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    email: Email
    username: str
    hashed_password: Optional[str] = None
    id: Optional[UserId] = None
    is_verified: bool = False

    # Pending email verification code
    otp: Optional[str] = None
    otp_expires_at: Optional[datetime] = None

    # Pending password reset
    reset_token: Optional[str] = None
    reset_token_expires_at: Optional[datetime] = None

    auth_provider: AuthProvider = AuthProvider.LOCAL
    google_id: Optional[str] = None
    picture: Optional[str] = None

    preferences: UserPreferences = field(default_factory=UserPreferences)
    watchlist: List[WatchlistItem] = field(default_factory=list)

    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    last_login: Optional[datetime] = None

    @classmethod
    def create(cls, email: Email, username: str, hashed_password: str) -> 'User':
        """Factory method for a password account awaiting email verification"""
        return cls(
            email=email,
            username=username,
            hashed_password=hashed_password,
            is_verified=False,
            auth_provider=AuthProvider.LOCAL,
        )

    @classmethod
    def create_from_google(
        cls,
        email: Email,
        username: str,
        google_id: str,
        picture: Optional[str] = None
    ) -> 'User':
        """Google accounts are verified by the identity provider"""
        return cls(
            email=email,
            username=username,
            hashed_password=None,
            is_verified=True,
            auth_provider=AuthProvider.GOOGLE,
            google_id=google_id,
            picture=picture,
        )

    @property
    def status(self) -> UserStatus:
        if not self.is_verified:
            return UserStatus.PENDING_VERIFICATION
        if self.reset_token:
            return UserStatus.PENDING_RESET
        return UserStatus.VERIFIED

    def _touch(self) -> None:
        self.updated_at = utcnow()

    # Email verification

    def set_otp(self, code: str, expires_at: datetime) -> None:
        """Store a new code, replacing any pending one"""
        self.otp = code
        self.otp_expires_at = expires_at
        self._touch()

    def otp_matches(self, code: str) -> bool:
        if not self.otp:
            return False
        return hmac.compare_digest(self.otp.encode(), code.encode())

    def is_otp_expired(self, now: Optional[datetime] = None) -> bool:
        if not self.otp_expires_at:
            return True
        return (now or utcnow()) >= self.otp_expires_at

    def mark_verified(self) -> None:
        self.is_verified = True
        self.otp = None
        self.otp_expires_at = None
        self._touch()

    # Password reset

    def set_reset_token(self, token: str, expires_at: datetime) -> None:
        """Only the latest token stays live"""
        self.reset_token = token
        self.reset_token_expires_at = expires_at
        self._touch()

    def reset_token_matches(self, token: str) -> bool:
        if not self.reset_token:
            return False
        return hmac.compare_digest(self.reset_token.encode(), token.encode())

    def is_reset_token_expired(self, now: Optional[datetime] = None) -> bool:
        if not self.reset_token_expires_at:
            return True
        return (now or utcnow()) >= self.reset_token_expires_at

    def change_password(self, hashed_password: str) -> None:
        self.hashed_password = hashed_password
        self.reset_token = None
        self.reset_token_expires_at = None
        self._touch()

    def prune_expired(self, now: Optional[datetime] = None) -> bool:
        """Drop expired codes and reset tokens; returns True if anything changed"""
        now = now or utcnow()
        changed = False
        if self.otp and self.is_otp_expired(now):
            self.otp = None
            self.otp_expires_at = None
            changed = True
        if self.reset_token and self.is_reset_token_expired(now):
            self.reset_token = None
            self.reset_token_expires_at = None
            changed = True
        return changed

    # External identity

    def link_google(self, google_id: str, picture: Optional[str] = None) -> None:
        self.google_id = google_id
        self.picture = picture
        self.auth_provider = AuthProvider.GOOGLE
        self.is_verified = True
        self._touch()

    def record_login(self) -> None:
        """Record user login"""
        self.last_login = utcnow()

    def rename(self, username: str) -> None:
        self.username = username
        self._touch()

    def set_avatar(self, avatar_url: str) -> None:
        self.picture = avatar_url
        self._touch()

    # Watchlist

    def find_watchlist_item(self, movie_id: str) -> Optional[WatchlistItem]:
        for item in self.watchlist:
            if item.movie_id == movie_id:
                return item
        return None

    def add_to_watchlist(self, item: WatchlistItem) -> WatchlistItem:
        if self.find_watchlist_item(item.movie_id):
            raise WatchlistItemExistsError()
        self.watchlist.append(item)
        self._touch()
        return item

    def remove_from_watchlist(self, movie_id: str) -> WatchlistItem:
        item = self.find_watchlist_item(movie_id)
        if not item:
            raise WatchlistItemNotFoundError()
        self.watchlist.remove(item)
        self._touch()
        return item

    def clear_watchlist(self) -> int:
        removed = len(self.watchlist)
        self.watchlist = []
        self._touch()
        return removed
