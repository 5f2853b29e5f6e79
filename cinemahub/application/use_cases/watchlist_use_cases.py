"""Watchlist use cases"""

from collections import Counter
from typing import Optional

from ...domain.entities.user import User
from ...domain.entities.watchlist_item import WatchlistItem
from ...domain.exceptions import UserNotFoundError, WatchlistItemNotFoundError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import UserId
from ..dtos.watchlist_dtos import (
    AddWatchlistItemDto,
    ClearedWatchlistDto,
    UpdateWatchlistItemDto,
    WatchlistDto,
    WatchlistItemDto,
    WatchlistSearchDto,
    WatchlistStatsDto,
)


SORT_KEYS = {
    "title": lambda item: item.title.lower(),
    "year": lambda item: item.year or 0,
    "rating": lambda item: item.user_rating or 0,
    "addedAt": lambda item: item.added_at,
}


class WatchlistUseCases:
    """Watchlist operations for one authenticated user"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def _get_user(self, user_id: UserId) -> User:
        user = await self.unit_of_work.users.get_by_id(user_id)
        if not user:
            raise UserNotFoundError()
        return user

    async def get_watchlist(self, user_id: UserId) -> WatchlistDto:
        async with self.unit_of_work:
            user = await self._get_user(user_id)
            items = [WatchlistItemDto.from_entity(item) for item in user.watchlist]
            return WatchlistDto(watchlist=items, count=len(items))

    async def add_movie(self, user_id: UserId, request: AddWatchlistItemDto) -> WatchlistItemDto:
        async with self.unit_of_work:
            user = await self._get_user(user_id)
            item = user.add_to_watchlist(WatchlistItem(
                movie_id=request.movie_id,
                title=request.title,
                poster=request.poster,
                year=request.year,
                rating=request.rating,
                genre=list(request.genre),
            ))
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()
            return WatchlistItemDto.from_entity(item)

    async def update_movie(
        self,
        user_id: UserId,
        movie_id: str,
        request: UpdateWatchlistItemDto
    ) -> WatchlistItemDto:
        """Mark as watched, rate or annotate a movie"""
        async with self.unit_of_work:
            user = await self._get_user(user_id)
            item = user.find_watchlist_item(movie_id)
            if not item:
                raise WatchlistItemNotFoundError()

            # Fields sent as null clear the stored value
            item.update(**request.model_dump(include=request.model_fields_set))
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()
            return WatchlistItemDto.from_entity(item)

    async def remove_movie(self, user_id: UserId, movie_id: str) -> WatchlistItemDto:
        async with self.unit_of_work:
            user = await self._get_user(user_id)
            item = user.remove_from_watchlist(movie_id)
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()
            return WatchlistItemDto.from_entity(item)

    async def clear(self, user_id: UserId) -> ClearedWatchlistDto:
        async with self.unit_of_work:
            user = await self._get_user(user_id)
            removed = user.clear_watchlist()
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()
            return ClearedWatchlistDto(removed_count=removed)

    async def search(
        self,
        user_id: UserId,
        query: Optional[str] = None,
        genre: Optional[str] = None,
        watched: Optional[bool] = None,
        sort_by: str = "addedAt",
        sort_order: str = "desc"
    ) -> WatchlistSearchDto:
        """Filter by title/notes text, genre and watched flag, then sort"""
        async with self.unit_of_work:
            user = await self._get_user(user_id)
            watchlist = list(user.watchlist)

        movies = watchlist
        if query:
            needle = query.lower()
            movies = [
                item for item in movies
                if needle in item.title.lower() or (item.notes and needle in item.notes.lower())
            ]
        if genre:
            movies = [item for item in movies if genre in item.genre]
        if watched is not None:
            movies = [item for item in movies if item.watched == watched]

        movies = sorted(movies, key=SORT_KEYS.get(sort_by, SORT_KEYS["addedAt"]), reverse=sort_order != "asc")

        return WatchlistSearchDto(
            movies=[WatchlistItemDto.from_entity(item) for item in movies],
            count=len(movies),
            total_count=len(watchlist),
        )

    async def stats(self, user_id: UserId) -> WatchlistStatsDto:
        async with self.unit_of_work:
            user = await self._get_user(user_id)
            watchlist = list(user.watchlist)

        total = len(watchlist)
        watched = sum(1 for item in watchlist if item.watched)
        ratings = [item.user_rating for item in watchlist if item.user_rating is not None]
        average = round(sum(ratings) / len(ratings), 1) if ratings else 0.0

        genres = Counter(genre for item in watchlist for genre in item.genre)
        years = Counter(str(item.year) for item in watchlist if item.year)
        recent = sorted(watchlist, key=lambda item: item.added_at, reverse=True)[:5]

        return WatchlistStatsDto(
            total_movies=total,
            watched_movies=watched,
            unwatched_movies=total - watched,
            average_rating=average,
            watched_percentage=round(watched / total * 100) if total else 0,
            genre_distribution=dict(genres),
            year_distribution=dict(years),
            recently_added=[WatchlistItemDto.from_entity(item) for item in recent],
        )
