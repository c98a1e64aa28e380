"""Export / import pipeline components."""

from .export import RatingExporter, serialize_ratings
from .importer import DEFAULT_DELAY_MS, RatingImporter, parse_ratings
from .migrate import MigrationPipeline, MigrationResult, MigrationState
from .profiles import fetch_profiles, resolve_profile_guid, switch_profile
from .waterfall import ExecutionStats, SequentialExecutor, waterfall

__all__ = [
    # Sequential execution
    "SequentialExecutor",
    "ExecutionStats",
    "waterfall",
    # Profiles
    "fetch_profiles",
    "resolve_profile_guid",
    "switch_profile",
    # Export / import
    "RatingExporter",
    "serialize_ratings",
    "RatingImporter",
    "parse_ratings",
    "DEFAULT_DELAY_MS",
    # Orchestration
    "MigrationPipeline",
    "MigrationResult",
    "MigrationState",
]
