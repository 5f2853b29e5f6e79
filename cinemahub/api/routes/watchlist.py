"""Watchlist routes"""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, status

from ...api.dependencies import get_current_user, get_unit_of_work
from ...application.dtos.user_dtos import ApiResponse
from ...application.dtos.watchlist_dtos import (
    AddWatchlistItemDto,
    ClearedWatchlistDto,
    UpdateWatchlistItemDto,
    WatchlistDto,
    WatchlistItemDto,
    WatchlistSearchDto,
    WatchlistStatsDto,
)
from ...application.use_cases.watchlist_use_cases import WatchlistUseCases
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("", response_model=ApiResponse[WatchlistDto])
async def get_watchlist(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Get user's watchlist"""
    watchlist = await WatchlistUseCases(unit_of_work).get_watchlist(current_user.id)
    return ApiResponse[WatchlistDto](data=watchlist)


@router.post("", response_model=ApiResponse[WatchlistItemDto], status_code=status.HTTP_201_CREATED)
async def add_to_watchlist(
    request: AddWatchlistItemDto,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Add movie to watchlist"""
    item = await WatchlistUseCases(unit_of_work).add_movie(current_user.id, request)
    return ApiResponse[WatchlistItemDto](message="Movie added to watchlist successfully", data=item)


@router.get("/stats", response_model=ApiResponse[WatchlistStatsDto])
async def get_watchlist_stats(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Get watchlist statistics"""
    stats = await WatchlistUseCases(unit_of_work).stats(current_user.id)
    return ApiResponse[WatchlistStatsDto](data=stats)


@router.get("/search", response_model=ApiResponse[WatchlistSearchDto])
async def search_watchlist(
    query: Optional[str] = None,
    genre: Optional[str] = None,
    watched: Optional[bool] = None,
    sort_by: Literal["title", "year", "rating", "addedAt"] = Query("addedAt", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query("desc", alias="sortOrder"),
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Search movies in watchlist"""
    result = await WatchlistUseCases(unit_of_work).search(
        current_user.id,
        query=query,
        genre=genre,
        watched=watched,
        sort_by=sort_by,
        sort_order=sort_order
    )
    return ApiResponse[WatchlistSearchDto](data=result)


@router.put("/{movie_id}", response_model=ApiResponse[WatchlistItemDto])
async def update_watchlist_item(
    movie_id: str,
    request: UpdateWatchlistItemDto,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Update movie in watchlist (mark as watched, add rating, etc.)"""
    item = await WatchlistUseCases(unit_of_work).update_movie(current_user.id, movie_id, request)
    return ApiResponse[WatchlistItemDto](message="Watchlist updated successfully", data=item)


@router.delete("/{movie_id}", response_model=ApiResponse[WatchlistItemDto])
async def remove_from_watchlist(
    movie_id: str,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Remove movie from watchlist"""
    item = await WatchlistUseCases(unit_of_work).remove_movie(current_user.id, movie_id)
    return ApiResponse[WatchlistItemDto](message="Movie removed from watchlist successfully", data=item)


@router.delete("", response_model=ApiResponse[ClearedWatchlistDto])
async def clear_watchlist(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Clear entire watchlist"""
    result = await WatchlistUseCases(unit_of_work).clear(current_user.id)
    return ApiResponse[ClearedWatchlistDto](message="Watchlist cleared successfully", data=result)
