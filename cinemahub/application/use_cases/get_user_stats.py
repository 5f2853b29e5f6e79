"""Get user statistics use case"""

from ...domain.exceptions import UserNotFoundError
from ...domain.value_objects.entity_ids import UserId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import UserStatsDto


class GetUserStatsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UserId) -> UserStatsDto:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)
            if not user:
                raise UserNotFoundError()
            watchlist = list(user.watchlist)

        # Averages the catalogue rating; movies without one count as 0
        average = 0.0
        if watchlist:
            average = round(sum(item.rating or 0 for item in watchlist) / len(watchlist), 1)

        return UserStatsDto(
            watchlist_count=len(watchlist),
            favorite_genres=list(user.preferences.favorite_genres),
            member_since=user.created_at,
            total_movies_watched=sum(1 for item in watchlist if item.watched),
            average_rating=average,
        )
