"""Core domain models and interfaces."""

from .models import (
    Credentials,
    MigrationRequest,
    Profile,
    Rating,
    rating_key,
)
from .protocols import (
    Executor,
    RatingSession,
    TaskFactory,
)
from .exceptions import (
    NetflixMigrateError,
    ConfigurationError,
    NetworkError,
    RateLimitError,
    AuthenticationError,
    ProfileNotFoundError,
    ProfileSwitchError,
    RatingFormatError,
    RatingUpdateError,
)

__all__ = [
    # Models
    "Credentials",
    "MigrationRequest",
    "Profile",
    "Rating",
    "rating_key",
    # Protocols
    "Executor",
    "RatingSession",
    "TaskFactory",
    # Exceptions
    "NetflixMigrateError",
    "ConfigurationError",
    "NetworkError",
    "RateLimitError",
    "AuthenticationError",
    "ProfileNotFoundError",
    "ProfileSwitchError",
    "RatingFormatError",
    "RatingUpdateError",
]
