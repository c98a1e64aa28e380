"""Main CLI entry point using Click."""

import asyncio
import functools
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from dotenv import load_dotenv

from netflix_migrate import __version__
from netflix_migrate.config import Settings, load_settings
from netflix_migrate.core.exceptions import ConfigurationError
from netflix_migrate.core.models import Credentials, MigrationRequest
from netflix_migrate.core.protocols import RatingSession
from netflix_migrate.infrastructure.session import HTTPRatingSession
from netflix_migrate.pipeline import (
    MigrationPipeline,
    RatingExporter,
    RatingImporter,
    SequentialExecutor,
    fetch_profiles,
)
from netflix_migrate.utils.errors import exit_with_message
from netflix_migrate.utils.logging import setup_logging

logger = logging.getLogger(__name__)

# "-" selects the standard stream for --output / --input
STDIO = "-"


def _get_base_dir() -> Path:
    """Get base directory from current working directory or its parents."""
    cwd = Path.cwd()
    # Check for config/config.yaml to identify project root
    if (cwd / "config" / "config.yaml").exists():
        return cwd
    for parent in cwd.parents:
        if (parent / "config" / "config.yaml").exists():
            return parent
    return cwd


@click.group()
@click.option("--base-dir", type=click.Path(exists=True, file_okay=False), default=None, help="Directory holding config/")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="netflix-migrate")
@click.pass_context
def cli(ctx: click.Context, base_dir: str | None, verbose: bool) -> None:
    """netflix-migrate - Export, import and migrate profile ratings."""
    ctx.ensure_object(dict)

    base = Path(base_dir) if base_dir else _get_base_dir()
    load_dotenv(base / ".env")
    setup_logging(verbose=verbose, simple=True)

    ctx.obj["base_dir"] = base
    ctx.obj.setdefault("session_factory", HTTPRatingSession.from_settings)

    # Load settings lazily
    ctx.obj["_settings"] = None


def _get_settings(ctx: click.Context) -> Settings:
    """Get or load settings."""
    if ctx.obj["_settings"] is None:
        ctx.obj["_settings"] = load_settings(ctx.obj["base_dir"])
    return ctx.obj["_settings"]


def account_options(with_profile: bool = True) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Add the --email / --password (/ --profile) options to a command."""

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if with_profile:
            func = click.option(
                "--profile", envvar="NETFLIX_PROFILE", default=None, help="Profile display name (exact match)"
            )(func)
        func = click.option("--password", envvar="NETFLIX_PASSWORD", default=None, help="Account password")(func)
        func = click.option("--email", envvar="NETFLIX_EMAIL", default=None, help="Account email")(func)
        return func

    return decorator


def _credentials(settings: Settings, email: str | None, password: str | None) -> Credentials:
    """Build credentials from options, falling back to config, then prompting."""
    email = email or settings.account.email or click.prompt("Email")
    password = password or settings.account.password or click.prompt("Password", hide_input=True)
    return Credentials(email=email, password=password)


def _profile_name(settings: Settings, profile: str | None) -> str:
    return profile or settings.account.profile or click.prompt("Profile")


def _stdio_or_path(value: str | None) -> str | None:
    return None if value in (None, STDIO) else value


def _run_pipeline(ctx: click.Context, request: MigrationRequest, importer: RatingImporter | None = None) -> None:
    """Run one migration and turn a failure into a diagnostic and exit status 1."""
    settings = _get_settings(ctx)
    session: RatingSession = ctx.obj["session_factory"](settings)
    pipeline = MigrationPipeline(session, exporter=RatingExporter(), importer=importer)

    try:
        result = asyncio.run(pipeline.run(request))
    finally:
        _close(session)

    if result.error is not None:
        exit_with_message(result.error)


def _close(session: Any) -> None:
    close = getattr(session, "close", None)
    if callable(close):
        close()


def _handle_config_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Report configuration problems the same way as pipeline failures."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConfigurationError as e:
            exit_with_message(e)

    return wrapper


@cli.command("export")
@account_options()
@click.option("-o", "--output", default=None, help="Write JSON to this file ('-' or omitted: stdout)")
@click.option("-s", "--spaces", type=click.IntRange(min=0), default=None, help="Indent JSON by this many spaces")
@click.pass_context
@_handle_config_errors
def export_command(
    ctx: click.Context,
    email: str | None,
    password: str | None,
    profile: str | None,
    output: str | None,
    spaces: int | None,
) -> None:
    """Export the rating history of a profile as JSON."""
    settings = _get_settings(ctx)
    request = MigrationRequest(
        credentials=_credentials(settings, email, password),
        profile=_profile_name(settings, profile),
        should_export=True,
        export_target=_stdio_or_path(output),
        indent=spaces if spaces is not None else settings.export.indent,
    )
    _run_pipeline(ctx, request)


@cli.command("import")
@account_options()
@click.option("-i", "--input", "input_", default=None, help="Read JSON from this file ('-' or omitted: stdin)")
@click.option(
    "--delay-ms",
    type=click.IntRange(min=0),
    default=None,
    help="Minimum milliseconds per rating update (default: from config, 100)",
)
@click.pass_context
@_handle_config_errors
def import_command(
    ctx: click.Context,
    email: str | None,
    password: str | None,
    profile: str | None,
    input_: str | None,
    delay_ms: int | None,
) -> None:
    """Import a JSON rating history into a profile, one title at a time."""
    settings = _get_settings(ctx)
    delay = delay_ms if delay_ms is not None else settings.import_.delay_ms
    request = MigrationRequest(
        credentials=_credentials(settings, email, password),
        profile=_profile_name(settings, profile),
        should_export=False,
        import_source=_stdio_or_path(input_),
    )
    importer = RatingImporter(SequentialExecutor(delay / 1000))
    _run_pipeline(ctx, request, importer=importer)


@cli.command()
@account_options(with_profile=False)
@click.pass_context
@_handle_config_errors
def profiles(ctx: click.Context, email: str | None, password: str | None) -> None:
    """List the profiles of an account."""
    settings = _get_settings(ctx)
    credentials = _credentials(settings, email, password)
    session: RatingSession = ctx.obj["session_factory"](settings)
    try:
        found = asyncio.run(fetch_profiles(session, credentials))
    except Exception as e:
        exit_with_message(e)
    finally:
        _close(session)

    for profile in found:
        click.echo(f"{profile.first_name}\t{profile.guid}")


if __name__ == "__main__":
    cli()
