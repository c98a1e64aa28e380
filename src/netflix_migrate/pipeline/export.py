"""Rating history export."""

import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

from netflix_migrate.core.protocols import RatingSession

logger = logging.getLogger(__name__)

# No whitespace between tokens
COMPACT_SEPARATORS = (",", ":")


def serialize_ratings(ratings: list[dict[str, Any]], indent: int | None = None) -> str:
    """Serialize ratings to JSON text.

    Args:
        ratings: Ratings in the order they should appear.
        indent: Pretty-print indentation width. ``None`` produces compact JSON.

    Returns:
        JSON text. Key order of every rating is kept as-is.
    """
    if indent is None:
        return json.dumps(ratings, separators=COMPACT_SEPARATORS, ensure_ascii=False)
    return json.dumps(ratings, indent=indent, ensure_ascii=False)


class RatingExporter:
    """Fetch the full rating history and write it to a file or stdout."""

    def __init__(self, stdout: TextIO | None = None):
        """Initialize exporter.

        Args:
            stdout: Stream used when no sink path is given. Defaults to
                ``sys.stdout`` resolved at write time.
        """
        self._stdout = stdout

    async def export(
        self,
        session: RatingSession,
        sink: str | Path | None = None,
        indent: int | None = None,
    ) -> list[dict[str, Any]]:
        """Export all ratings of the active profile.

        Exactly one target is written, exactly once: ``sink`` when given
        (replacing its content), standard output otherwise.

        Args:
            session: Authenticated session with the profile already active.
            sink: Destination file path, or None for standard output.
            indent: Pretty-print indentation width, or None for compact JSON.

        Returns:
            The exported ratings.
        """
        ratings = await session.get_rating_history()
        text = serialize_ratings(ratings, indent)

        if sink is not None:
            Path(sink).write_text(text, encoding="utf-8")
            logger.info("Exported %d ratings to %s", len(ratings), sink)
        else:
            stream = self._stdout or sys.stdout
            stream.write(text)
            stream.flush()
            logger.info("Exported %d ratings to stdout", len(ratings))

        return ratings


__all__ = ["RatingExporter", "serialize_ratings", "COMPACT_SEPARATORS"]
