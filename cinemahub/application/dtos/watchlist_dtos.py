"""Watchlist DTOs for API requests and responses"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Optional, Union
from datetime import datetime

from ...domain.entities.watchlist_item import WatchlistItem


class AddWatchlistItemDto(BaseModel):
    """Request DTO for adding a movie to the watchlist"""
    movie_id: Union[str, int] = Field(..., alias="movieId")
    title: str = Field(..., min_length=1)
    poster: Optional[str] = None
    year: Optional[int] = None
    rating: Optional[float] = None
    genre: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("movie_id")
    @classmethod
    def movie_id_as_string(cls, value):
        value = str(value).strip()
        if not value:
            raise ValueError("Movie ID is required")
        return value


class UpdateWatchlistItemDto(BaseModel):
    watched: Optional[bool] = None
    user_rating: Optional[float] = Field(None, alias="userRating", ge=0, le=10)
    notes: Optional[str] = Field(None, max_length=2000)

    model_config = ConfigDict(populate_by_name=True)


class WatchlistItemDto(BaseModel):
    movie_id: str = Field(..., alias="movieId")
    title: str
    poster: Optional[str] = None
    year: Optional[int] = None
    rating: Optional[float] = None
    genre: List[str] = Field(default_factory=list)
    watched: bool = False
    user_rating: Optional[float] = Field(None, alias="userRating")
    notes: Optional[str] = None
    added_at: datetime = Field(..., alias="addedAt")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, item: WatchlistItem) -> 'WatchlistItemDto':
        return cls(
            movie_id=item.movie_id,
            title=item.title,
            poster=item.poster,
            year=item.year,
            rating=item.rating,
            genre=list(item.genre),
            watched=item.watched,
            user_rating=item.user_rating,
            notes=item.notes,
            added_at=item.added_at,
        )


class WatchlistDto(BaseModel):
    watchlist: List[WatchlistItemDto]
    count: int


class ClearedWatchlistDto(BaseModel):
    removed_count: int = Field(..., alias="removedCount")

    model_config = ConfigDict(populate_by_name=True)


class WatchlistStatsDto(BaseModel):
    total_movies: int = Field(..., alias="totalMovies")
    watched_movies: int = Field(..., alias="watchedMovies")
    unwatched_movies: int = Field(..., alias="unwatchedMovies")
    average_rating: float = Field(..., alias="averageRating")
    watched_percentage: int = Field(..., alias="watchedPercentage")
    genre_distribution: Dict[str, int] = Field(..., alias="genreDistribution")
    year_distribution: Dict[str, int] = Field(..., alias="yearDistribution")
    recently_added: List[WatchlistItemDto] = Field(..., alias="recentlyAdded")

    model_config = ConfigDict(populate_by_name=True)


class WatchlistSearchDto(BaseModel):
    movies: List[WatchlistItemDto]
    count: int
    total_count: int = Field(..., alias="totalCount")

    model_config = ConfigDict(populate_by_name=True)
