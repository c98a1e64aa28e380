"""Rating history import."""

import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

from netflix_migrate.core.exceptions import RatingFormatError
from netflix_migrate.core.models import rating_key
from netflix_migrate.core.protocols import Executor, RatingSession, TaskFactory

from .waterfall import SequentialExecutor

logger = logging.getLogger(__name__)

# Minimum time each rating update occupies, in milliseconds
DEFAULT_DELAY_MS = 100


def parse_ratings(text: str) -> list[Any]:
    """Parse a JSON rating document.

    Raises:
        RatingFormatError: If the text is not JSON or not a JSON array.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RatingFormatError(f"Rating document is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise RatingFormatError(f"Rating document must be a JSON array, got {type(data).__name__}")
    return data


class RatingImporter:
    """Replay a JSON rating list into the active profile, one title at a time."""

    def __init__(
        self,
        executor: Executor | None = None,
        stdin: TextIO | None = None,
    ):
        """Initialize importer.

        Args:
            executor: Runner for the update tasks. Defaults to a
                SequentialExecutor spacing updates DEFAULT_DELAY_MS apart.
            stdin: Stream read when no source path is given. Defaults to
                ``sys.stdin`` resolved at read time.
        """
        self.executor = executor if executor is not None else SequentialExecutor(DEFAULT_DELAY_MS / 1000)
        self._stdin = stdin

    def read_source(self, source: str | Path | None = None) -> str:
        """Return the full text of ``source``, or of standard input when None."""
        if source is not None:
            return Path(source).read_text(encoding="utf-8")
        return (self._stdin or sys.stdin).read()

    def build_tasks(self, session: RatingSession, ratings: list[Any]) -> list[TaskFactory]:
        """Build one update task factory per rating, in list order.

        Fields are read when a task runs, so a malformed entry only fails at
        its own position.
        """
        return [_update_task(session, index, rating) for index, rating in enumerate(ratings)]

    async def import_(
        self,
        session: RatingSession,
        source: str | Path | None = None,
    ) -> list[dict[str, Any]]:
        """Import ratings from ``source`` (or standard input) into the active profile.

        Every rating is sent as ``set_video_rating(movieID, yourRating)``
        with the values exactly as they appear in the document.

        Returns:
            The ratings that were replayed.
        """
        ratings = parse_ratings(self.read_source(source))
        logger.info("Importing %d ratings from %s", len(ratings), source or "stdin")

        await self.executor.run(self.build_tasks(session, ratings))

        logger.info("Imported %d ratings", len(ratings))
        return ratings


def _update_task(session: RatingSession, index: int, rating: Any) -> TaskFactory:
    async def task():
        try:
            movie_id, value = rating_key(rating)
        except KeyError as e:
            raise RatingFormatError(f"Rating #{index} is missing field {e.args[0]!r}") from e
        except TypeError as e:
            raise RatingFormatError(f"Rating #{index} is not a JSON object") from e
        logger.debug("Setting rating %s for title %s", value, movie_id)
        await session.set_video_rating(movie_id, value)

    return task


__all__ = ["RatingImporter", "parse_ratings", "DEFAULT_DELAY_MS"]
