"""User routes for profile management"""

from fastapi import APIRouter, Depends

from ...api.dependencies import get_current_user, get_unit_of_work
from ...application.dtos.user_dtos import (
    ApiResponse,
    AvatarDto,
    PreferencesDto,
    ProfileDto,
    UpdateAvatarDto,
    UpdatePreferencesDto,
    UpdateProfileDto,
    UserStatsDto,
    UserSummaryDto,
)
from ...application.use_cases.get_user_profile import GetUserProfileUseCase
from ...application.use_cases.update_user_profile import UpdateUserProfileUseCase
from ...application.use_cases.update_user_avatar import UpdateUserAvatarUseCase
from ...application.use_cases.user_preferences_use_cases import UserPreferencesUseCases
from ...application.use_cases.get_user_stats import GetUserStatsUseCase
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("/profile", response_model=ApiResponse[ProfileDto])
async def get_profile(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Get current user profile"""
    profile = await GetUserProfileUseCase(unit_of_work).execute(current_user.id)
    return ApiResponse[ProfileDto](data=profile)


@router.put("/profile", response_model=ApiResponse[UserSummaryDto], response_model_exclude_none=True)
async def update_profile(
    request: UpdateProfileDto,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Update current user profile"""
    user = await UpdateUserProfileUseCase(unit_of_work).execute(current_user.id, request)
    return ApiResponse[UserSummaryDto](message="Profile updated successfully", data=user)


@router.post("/avatar", response_model=ApiResponse[AvatarDto])
async def upload_avatar(
    request: UpdateAvatarDto,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Set the user's avatar URL"""
    avatar = await UpdateUserAvatarUseCase(unit_of_work).execute(current_user.id, request)
    return ApiResponse[AvatarDto](message="Avatar updated successfully", data=avatar)


@router.get("/preferences", response_model=ApiResponse[PreferencesDto])
async def get_preferences(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Get user preferences"""
    preferences = await UserPreferencesUseCases(unit_of_work).get_preferences(current_user.id)
    return ApiResponse[PreferencesDto](data=preferences)


@router.put("/preferences", response_model=ApiResponse[PreferencesDto])
async def update_preferences(
    request: UpdatePreferencesDto,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Update user preferences"""
    preferences = await UserPreferencesUseCases(unit_of_work).update_preferences(current_user.id, request)
    return ApiResponse[PreferencesDto](message="Preferences updated successfully", data=preferences)


@router.get("/stats", response_model=ApiResponse[UserStatsDto])
async def get_user_stats(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Get user statistics"""
    stats = await GetUserStatsUseCase(unit_of_work).execute(current_user.id)
    return ApiResponse[UserStatsDto](data=stats)
