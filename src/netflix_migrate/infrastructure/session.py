"""HTTP-backed account session.

Implements the RatingSession protocol on top of HTTPClient. The requests
calls block, so each one is moved to a worker thread with
``asyncio.to_thread``; calls are still issued one at a time by the pipeline.
"""

import asyncio
import logging
from typing import Any, Self

import requests

from netflix_migrate.config.settings import SessionConfig, Settings
from netflix_migrate.core.exceptions import (
    AuthenticationError,
    NetworkError,
    ProfileSwitchError,
    RatingUpdateError,
)
from netflix_migrate.core.models import Credentials, Profile

from .http import HTTPClient

logger = logging.getLogger(__name__)


class HTTPRatingSession:
    """Account session speaking JSON over HTTP."""

    def __init__(self, config: SessionConfig, client: HTTPClient | None = None):
        self.config = config
        self.endpoints = config.endpoints
        self.client = client or HTTPClient(
            base_url=config.base_url,
            headers={"User-Agent": config.user_agent, "Accept": "application/json"},
            timeout=config.timeout,
            max_retries=config.max_retries,
            backoff_factor=config.backoff_factor,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        return cls(settings.session)

    async def login(self, credentials: Credentials) -> None:
        await asyncio.to_thread(self._login, credentials)

    async def list_profiles(self) -> list[Profile]:
        return await asyncio.to_thread(self._list_profiles)

    async def switch_profile(self, guid: str) -> Any:
        return await asyncio.to_thread(self._switch_profile, guid)

    async def get_rating_history(self) -> list[dict[str, Any]]:
        return await asyncio.to_thread(self._get_rating_history)

    async def set_video_rating(self, movie_id: Any, rating: Any) -> None:
        await asyncio.to_thread(self._set_video_rating, movie_id, rating)

    def _login(self, credentials: Credentials) -> None:
        response = self.client.post(
            self.endpoints.login,
            json={"email": credentials.email, "password": credentials.password},
        )
        if not response.ok:
            raise AuthenticationError(f"Login failed for {credentials.email} (HTTP {response.status_code})")
        logger.debug("Logged in as %s", credentials.email)

    def _list_profiles(self) -> list[Profile]:
        data = self._get_json(self.endpoints.profiles)
        items = data.get("profiles", []) if isinstance(data, dict) else data
        return [Profile.model_validate(item) for item in items]

    def _switch_profile(self, guid: str) -> Any:
        response = self.client.post(self.endpoints.switch_profile, json={"switchProfileGuid": guid})
        if not response.ok:
            raise ProfileSwitchError(f"Could not switch to profile {guid} (HTTP {response.status_code})")
        return _json_or_none(response)

    def _get_rating_history(self) -> list[dict[str, Any]]:
        """Collect every history page, keeping service order."""
        ratings: list[dict[str, Any]] = []
        page = 0
        while True:
            data = self._get_json(
                self.endpoints.rating_history,
                params={"pg": page, "pgsize": self.config.page_size},
            )
            items = data.get("ratingItems") or []
            ratings.extend(items)
            total = data.get("totalRatings")
            logger.debug("Fetched rating page %d (%d items, total %s)", page, len(items), total)
            if not items or (total is not None and len(ratings) >= total):
                break
            page += 1
        return ratings

    def _set_video_rating(self, movie_id: Any, rating: Any) -> None:
        response = self.client.post(self.endpoints.set_rating, json={"titleid": movie_id, "rating": rating})
        if not response.ok:
            raise RatingUpdateError(movie_id, f"Rating update rejected (HTTP {response.status_code})")

    def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        response = self.client.get(path, params=params)
        if not response.ok:
            raise NetworkError(f"HTTP {response.status_code}", url=response.url or self.client.url(path))
        try:
            return response.json()
        except ValueError as e:
            raise NetworkError("Response is not valid JSON", url=response.url) from e

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def _json_or_none(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


__all__ = ["HTTPRatingSession"]
