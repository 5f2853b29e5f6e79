"""User preferences value holder"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class UserPreferences:
    favorite_genres: List[str] = field(default_factory=list)
    language: str = "en"
    notifications: bool = True

    def update(
        self,
        favorite_genres: Optional[List[str]] = None,
        language: Optional[str] = None,
        notifications: Optional[bool] = None
    ) -> None:
        """Apply the preferences that were supplied"""
        if favorite_genres is not None:
            self.favorite_genres = list(favorite_genres)
        if language:
            self.language = language
        if notifications is not None:
            self.notifications = notifications
