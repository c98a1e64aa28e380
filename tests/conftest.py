"""Pytest fixtures and configuration."""

import asyncio
import time
from typing import Any

import pytest

from netflix_migrate.core.models import Credentials, MigrationRequest, Profile

# JSON is hard coded to notice when serialization changes
RATINGS_JSON = (
    '[{"ratingType":"star","title":"Some movie","movieID":12345678,"yourRating":5,"intRating":50,'
    '"date":"01/02/2016","timestamp":1234567890123,"comparableDate":1234567890},'
    '{"ratingType":"thumb","title":"Amazing Show","movieID":87654321,"yourRating":2,'
    '"date":"02/02/2018","timestamp":2234567890123,"comparableDate":2234567890}]'
)

RATINGS_JSON_4_SPACES = (
    "[\n"
    "    {\n"
    '        "ratingType": "star",\n'
    '        "title": "Some movie",\n'
    '        "movieID": 12345678,\n'
    '        "yourRating": 5,\n'
    '        "intRating": 50,\n'
    '        "date": "01/02/2016",\n'
    '        "timestamp": 1234567890123,\n'
    '        "comparableDate": 1234567890\n'
    "    },\n"
    "    {\n"
    '        "ratingType": "thumb",\n'
    '        "title": "Amazing Show",\n'
    '        "movieID": 87654321,\n'
    '        "yourRating": 2,\n'
    '        "date": "02/02/2018",\n'
    '        "timestamp": 2234567890123,\n'
    '        "comparableDate": 2234567890\n'
    "    }\n"
    "]"
)


class FakeSession:
    """In-memory RatingSession that records every call in order."""

    def __init__(
        self,
        profiles: list[Profile] | None = None,
        ratings: list[dict[str, Any]] | None = None,
        latency: float = 0.0,
    ):
        self.profiles = profiles or []
        self.ratings = ratings or []
        self.latency = latency
        self.calls: list[tuple[Any, ...]] = []
        self.set_times: list[float] = []
        self.failures: dict[str, Exception] = {}
        self.closed = False

    async def _call(self, name: str, *args: Any) -> None:
        self.calls.append((name, *args))
        if self.latency:
            await asyncio.sleep(self.latency)
        if name in self.failures:
            raise self.failures[name]

    async def login(self, credentials: Credentials) -> None:
        await self._call("login", credentials)

    async def list_profiles(self) -> list[Profile]:
        await self._call("list_profiles")
        return list(self.profiles)

    async def switch_profile(self, guid: str) -> Any:
        await self._call("switch_profile", guid)
        return {"active": guid}

    async def get_rating_history(self) -> list[dict[str, Any]]:
        await self._call("get_rating_history")
        return list(self.ratings)

    async def set_video_rating(self, movie_id: Any, rating: Any) -> None:
        self.set_times.append(time.monotonic())
        await self._call("set_video_rating", movie_id, rating)

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def sample_ratings() -> list[dict[str, Any]]:
    """Two ratings, one star and one thumb, in service order."""
    return [
        {
            "ratingType": "star",
            "title": "Some movie",
            "movieID": 12345678,
            "yourRating": 5,
            "intRating": 50,
            "date": "01/02/2016",
            "timestamp": 1234567890123,
            "comparableDate": 1234567890,
        },
        {
            "ratingType": "thumb",
            "title": "Amazing Show",
            "movieID": 87654321,
            "yourRating": 2,
            "date": "02/02/2018",
            "timestamp": 2234567890123,
            "comparableDate": 2234567890,
        },
    ]


@pytest.fixture
def sample_profiles() -> list[Profile]:
    """Profiles with distinct display names, guid equals list position."""
    names = [
        "Michael",
        "Klaus",
        "Carsten",
        "Yannic",
        "Franziska",
        "Anna",
        "Hanna",
        "Marcel",
        "1234567890",
        "What's wrong with you?",
    ]
    return [Profile(guid=str(i), firstName=name) for i, name in enumerate(names)]


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(email="user@example.com", password="hunter2")


@pytest.fixture
def fake_session(sample_profiles, sample_ratings) -> FakeSession:
    return FakeSession(profiles=sample_profiles, ratings=sample_ratings)


@pytest.fixture
def export_request(credentials) -> MigrationRequest:
    return MigrationRequest(credentials=credentials, profile="Klaus", should_export=True)


@pytest.fixture
def import_request(credentials) -> MigrationRequest:
    return MigrationRequest(credentials=credentials, profile="Klaus", should_export=False)
