"""Profile lookup and activation."""

import logging
from typing import Any

from netflix_migrate.core.exceptions import ProfileNotFoundError
from netflix_migrate.core.models import Credentials, Profile
from netflix_migrate.core.protocols import RatingSession

logger = logging.getLogger(__name__)


async def resolve_profile_guid(session: RatingSession, name: str) -> str:
    """Return the guid of the first profile whose display name equals ``name``.

    Matching is exact and case-sensitive. Errors raised while fetching the
    profile list propagate unchanged.

    Raises:
        ProfileNotFoundError: If the fetched list has no profile called ``name``.
    """
    profiles = await session.list_profiles()
    for profile in profiles:
        if profile.first_name == name:
            logger.debug("Resolved profile %r to guid %s", name, profile.guid)
            return profile.guid
    raise ProfileNotFoundError(name, [profile.first_name for profile in profiles])


async def switch_profile(session: RatingSession, guid: str) -> Any:
    """Activate the profile ``guid`` and return whatever the session returns."""
    logger.debug("Switching to profile %s", guid)
    return await session.switch_profile(guid)


async def fetch_profiles(session: RatingSession, credentials: Credentials) -> list[Profile]:
    """Log in and return every profile of the account."""
    await session.login(credentials)
    return await session.list_profiles()


__all__ = ["fetch_profiles", "resolve_profile_guid", "switch_profile"]
