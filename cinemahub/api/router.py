"""Main API router"""

from datetime import datetime, timezone

from fastapi import APIRouter

from .routes import auth, users, watchlist
from ..core.config import settings

# Main API router
api_router = APIRouter()

# Include all routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(watchlist.router, prefix="/watchlist", tags=["watchlist"])


@api_router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "success": True,
        "message": f"{settings.PROJECT_NAME} API is running",
        "version": settings.VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
