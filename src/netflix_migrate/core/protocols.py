"""Protocol definitions for netflix-migrate components.

The session is the only collaborator that talks to the service. Everything
in the pipeline receives it (and each other) explicitly.
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, runtime_checkable

from .models import Credentials, Profile

TaskFactory = Callable[[], Awaitable[Any]]
"""Zero-argument callable that starts one asynchronous operation when invoked."""


@runtime_checkable
class RatingSession(Protocol):
    """Protocol for an authenticated account session."""

    async def login(self, credentials: Credentials) -> None:
        """Authenticate the session."""
        ...

    async def list_profiles(self) -> list[Profile]:
        """Return all profiles of the account."""
        ...

    async def switch_profile(self, guid: str) -> Any:
        """Make the profile with ``guid`` the active one."""
        ...

    async def get_rating_history(self) -> list[dict[str, Any]]:
        """Return every rating of the active profile in service order."""
        ...

    async def set_video_rating(self, movie_id: Any, rating: Any) -> None:
        """Store ``rating`` for the title ``movie_id`` on the active profile."""
        ...


@runtime_checkable
class Executor(Protocol):
    """Protocol for runners that take an ordered list of task factories."""

    async def run(self, factories: list[TaskFactory]) -> Any:
        """Run the factories and settle once all of them have been handled."""
        ...


__all__ = [
    "TaskFactory",
    "RatingSession",
    "Executor",
]
