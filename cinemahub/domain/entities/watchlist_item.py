"""Watchlist entry entity"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional, List


@dataclass
class WatchlistItem:
    movie_id: str
    title: str
    poster: Optional[str] = None
    year: Optional[int] = None
    rating: Optional[float] = None
    genre: List[str] = field(default_factory=list)
    watched: bool = False
    user_rating: Optional[float] = None
    notes: Optional[str] = None
    added_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **changes: Any) -> None:
        """Apply the fields present in ``changes``.

        A present ``None`` clears ``user_rating`` or ``notes``; ``watched`` is
        coerced to bool.
        """
        if "watched" in changes:
            self.watched = bool(changes["watched"])
        if "user_rating" in changes:
            self.user_rating = changes["user_rating"]
        if "notes" in changes:
            self.notes = changes["notes"]
