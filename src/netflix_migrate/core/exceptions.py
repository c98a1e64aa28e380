"""Custom exceptions for netflix-migrate."""


class NetflixMigrateError(Exception):
    """Base exception for all netflix-migrate errors."""

    pass


class ConfigurationError(NetflixMigrateError):
    """Raised when configuration is invalid or missing."""

    pass


class NetworkError(NetflixMigrateError):
    """Raised when network operations fail."""

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        msg = f"{message} (url: {url})" if url else message
        super().__init__(msg)


class RateLimitError(NetworkError):
    """Raised when the service keeps rejecting requests as too frequent."""

    def __init__(self, service: str, retry_after: int | None = None) -> None:
        self.service = service
        self.retry_after = retry_after
        msg = f"Rate limit exceeded for {service}"
        if retry_after:
            msg += f" (retry after {retry_after}s)"
        super().__init__(msg)


class AuthenticationError(NetflixMigrateError):
    """Raised when logging in to the account fails."""

    pass


class ProfileNotFoundError(NetflixMigrateError):
    """Raised when no profile carries the requested display name."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = list(available or [])
        msg = f"No profile named {name!r} found"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        super().__init__(msg)


class ProfileSwitchError(NetflixMigrateError):
    """Raised when the session cannot be switched to a profile."""

    pass


class RatingFormatError(NetflixMigrateError):
    """Raised when a rating document cannot be read as a list of ratings."""

    pass


class RatingUpdateError(NetflixMigrateError):
    """Raised when the service refuses to store a rating."""

    def __init__(self, movie_id: int, message: str) -> None:
        self.movie_id = movie_id
        super().__init__(f"[{movie_id}] {message}")


__all__ = [
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
