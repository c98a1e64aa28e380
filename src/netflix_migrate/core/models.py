"""Core data models."""

from dataclasses import dataclass
from typing import Any, Literal, NotRequired, TypedDict

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class Credentials:
    """Account login credentials.

    Never persisted. The password is masked in the repr.
    """

    email: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password='***')"


class Profile(BaseModel):
    """A named profile within an account."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    guid: str
    first_name: str = Field(alias="firstName")


class Rating(TypedDict):
    """Wire shape of a single rating as returned by the service.

    Ratings travel through the tool as the plain dicts the service (or the
    JSON document) produced, so key order and field set stay untouched.
    ``intRating`` is only present for ``"star"`` ratings.
    """

    ratingType: Literal["star", "thumb"]
    title: str
    movieID: int
    yourRating: float
    intRating: NotRequired[int]
    date: str
    timestamp: int
    comparableDate: int


@dataclass
class MigrationRequest:
    """Everything one export or import run needs.

    ``export_target`` and ``import_source`` of ``None`` select the standard
    streams; ``indent`` of ``None`` selects compact JSON.
    """

    credentials: Credentials
    profile: str
    should_export: bool
    export_target: str | None = None
    import_source: str | None = None
    indent: int | None = None


def rating_key(rating: dict[str, Any]) -> tuple[Any, Any]:
    """Return the ``(movieID, yourRating)`` pair a rating is replayed with."""
    return rating["movieID"], rating["yourRating"]


__all__ = [
    "Credentials",
    "Profile",
    "Rating",
    "MigrationRequest",
    "rating_key",
]
