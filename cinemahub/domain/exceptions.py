"""Domain exceptions

Every error the API reports on purpose derives from ``CinemaHubError``. The
exception handlers in ``cinemahub.main`` turn them into the JSON envelope using
``status_code`` and ``message``.
"""

from typing import Any, List, Optional


class CinemaHubError(Exception):
    """Base exception for all CinemaHub errors."""

    status_code: int = 400
    message: str = "Request failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Any]] = None):
        self.message = message or self.message
        self.errors = errors
        super().__init__(self.message)


class ConfigurationError(CinemaHubError):
    """Raised when the process is started with an unusable configuration."""

    status_code = 500
    message = "Server is misconfigured"


class ValidationError(CinemaHubError):
    message = "Validation error"


class DuplicateEmailError(CinemaHubError):
    message = "User already exists"


class UserNotFoundError(CinemaHubError):
    status_code = 404
    message = "User not found"


class InvalidCredentialsError(CinemaHubError):
    """Unknown email and wrong password share this error so accounts cannot be enumerated."""

    message = "Invalid credentials"


class NotVerifiedError(CinemaHubError):
    message = "Please verify your email first"


class CodeMismatchError(CinemaHubError):
    message = "Invalid OTP"


class CodeExpiredError(CinemaHubError):
    message = "OTP has expired"


class InvalidResetTokenError(CinemaHubError):
    message = "Invalid reset token"


class ResetTokenExpiredError(CinemaHubError):
    message = "Reset token has expired"


class AuthenticationRequiredError(CinemaHubError):
    status_code = 401
    message = "Access token required"


class InvalidOrExpiredTokenError(CinemaHubError):
    status_code = 403
    message = "Invalid or expired token"


class TokenExpiredError(InvalidOrExpiredTokenError):
    pass


class WatchlistItemExistsError(CinemaHubError):
    message = "Movie already in watchlist"


class WatchlistItemNotFoundError(CinemaHubError):
    status_code = 404
    message = "Movie not found in watchlist"


class ExternalServiceUnavailableError(CinemaHubError):
    """An upstream dependency could not be reached in time."""

    status_code = 503
    message = "External service unavailable"
