"""Infrastructure adapters for the account service."""

from .http import HTTPClient
from .session import HTTPRatingSession

__all__ = ["HTTPClient", "HTTPRatingSession"]
