"""
Domain Enums - Business domain enumerations
"""

from enum import Enum


class AuthProvider(str, Enum):
    LOCAL = "local"
    GOOGLE = "google"


class UserStatus(str, Enum):
    PENDING_VERIFICATION = "pending_verification"
    VERIFIED = "verified"
    PENDING_RESET = "pending_reset"
