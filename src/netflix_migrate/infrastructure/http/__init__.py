"""HTTP infrastructure."""

from .client import HTTPClient

__all__ = ["HTTPClient"]
