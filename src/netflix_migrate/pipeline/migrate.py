"""Migration pipeline orchestrator.

Walks the dependent steps of one run in order:

    login -> resolve profile -> switch profile -> export | import

The first step that raises stops the run. The pipeline is the single place
where failures are intercepted; it hands the original exception back in the
result instead of terminating the process, and the caller decides how to
surface it.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from netflix_migrate.core.models import MigrationRequest
from netflix_migrate.core.protocols import RatingSession

from .export import RatingExporter
from .importer import RatingImporter
from .profiles import resolve_profile_guid, switch_profile

logger = logging.getLogger(__name__)

ProfileResolver = Callable[[RatingSession, str], Awaitable[str]]
ProfileSwitcher = Callable[[RatingSession, str], Awaitable[Any]]


class MigrationState(str, Enum):
    """Stages of a migration run."""

    START = "start"
    AUTHENTICATED = "authenticated"
    PROFILE_RESOLVED = "profile_resolved"
    PROFILE_ACTIVE = "profile_active"
    DONE = "done"
    FAILED = "failed"


@dataclass
class MigrationResult:
    """Outcome of a migration run.

    ``state`` is DONE with ``error`` None on success, or FAILED with ``error``
    holding the first exception raised. ``failed_at`` is the last state reached
    before the failure.
    """

    state: MigrationState = MigrationState.START
    error: Exception | None = None
    failed_at: MigrationState | None = None
    profile_guid: str | None = None
    ratings: list[dict[str, Any]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.state is MigrationState.DONE


class MigrationPipeline:
    """Orchestrates one export or import run against a session."""

    def __init__(
        self,
        session: RatingSession,
        *,
        exporter: RatingExporter | None = None,
        importer: RatingImporter | None = None,
        resolver: ProfileResolver = resolve_profile_guid,
        switcher: ProfileSwitcher = switch_profile,
    ):
        """Initialize migration pipeline.

        Args:
            session: Session used for every step.
            exporter: Exporter for export runs.
            importer: Importer for import runs.
            resolver: Coroutine mapping a profile name to its guid.
            switcher: Coroutine activating a profile guid.
        """
        self.session = session
        self.exporter = exporter if exporter is not None else RatingExporter()
        self.importer = importer if importer is not None else RatingImporter()
        self.resolver = resolver
        self.switcher = switcher

    async def run(
        self,
        request: MigrationRequest,
        on_progress: Callable[[str, str], None] | None = None,
    ) -> MigrationResult:
        """Execute the run described by ``request``.

        Args:
            request: Credentials, profile name and export/import options.
            on_progress: Optional callback for progress updates.
                        Called with (stage_name: str, message: str).

        Returns:
            MigrationResult; never raises for failures of individual steps.
        """
        result = MigrationResult()

        def progress(stage: str, msg: str) -> None:
            logger.info(msg)
            if on_progress:
                on_progress(stage, msg)

        try:
            progress("login", f"Logging in as {request.credentials.email}")
            await self.session.login(request.credentials)
            result.state = MigrationState.AUTHENTICATED

            progress("profile", f"Looking up profile {request.profile!r}")
            result.profile_guid = await self.resolver(self.session, request.profile)
            result.state = MigrationState.PROFILE_RESOLVED

            await self.switcher(self.session, result.profile_guid)
            result.state = MigrationState.PROFILE_ACTIVE

            if request.should_export:
                progress("export", "Exporting rating history")
                result.ratings = await self.exporter.export(
                    self.session,
                    request.export_target,
                    request.indent,
                )
            else:
                progress("import", "Importing rating history")
                result.ratings = await self.importer.import_(self.session, request.import_source)
            result.state = MigrationState.DONE
        except Exception as e:
            result.failed_at = result.state
            result.state = MigrationState.FAILED
            result.error = e
            logger.debug("Migration failed after state %s", result.failed_at.value, exc_info=True)

        return result


__all__ = [
    "MigrationPipeline",
    "MigrationResult",
    "MigrationState",
    "ProfileResolver",
    "ProfileSwitcher",
]
