"""
FastAPI main application with DDD architecture
"""

import asyncio
import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager, suppress
from starlette.exceptions import HTTPException as StarletteHTTPException

from cinemahub.core.config import settings
from cinemahub.core.security import get_secret_key
from cinemahub.api.router import api_router
from cinemahub.db.database import get_database
from cinemahub.application.dtos.user_dtos import ErrorResponse
from cinemahub.domain.exceptions import CinemaHubError

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="[%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Fails fast outside development when SECRET_KEY is missing
    get_secret_key()
    if not settings.email_configured:
        logger.warning("SMTP credentials not set; verification codes and reset links will be logged")
    logger.info("Starting %s API (%s)...", settings.PROJECT_NAME, settings.ENVIRONMENT)

    prune_task = None
    if settings.PRUNE_INTERVAL_SECONDS > 0:
        prune_task = asyncio.create_task(
            get_database().prune_periodically(settings.PRUNE_INTERVAL_SECONDS)
        )

    yield

    if prune_task is not None:
        prune_task.cancel()
        with suppress(asyncio.CancelledError):
            await prune_task
    logger.info("Shutting down %s API...", settings.PROJECT_NAME)


# Create FastAPI app
app = FastAPI(
    title=f"{settings.PROJECT_NAME} API",
    description=settings.DESCRIPTION,
    version=settings.VERSION,
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(CinemaHubError)
async def cinemahub_error_handler(request: Request, exc: CinemaHubError):
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return _error_response(exc.status_code, ErrorResponse(message=exc.message, errors=exc.errors))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        # Drop the leading "body"/"query"/"path" segment
        location = [str(part) for part in error.get("loc", ())[1:]]
        errors.append({"field": ".".join(location), "message": error.get("msg", "")})
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(message="Validation error", errors=errors)
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return _error_response(exc.status_code, ErrorResponse(message=message))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    detail = str(exc) if settings.DEBUG or settings.is_development else "Internal server error"
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(message="Something went wrong!", error=detail)
    )


# Include API routes
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": f"{settings.PROJECT_NAME} API", "version": settings.VERSION}


if __name__ == "__main__":
    uvicorn.run(
        "cinemahub.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
