"""Configuration settings models."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from netflix_migrate.core.exceptions import ConfigurationError

from .loader import load_config


# Account Configuration
class AccountConfig(BaseModel):
    """Default login credentials and profile."""

    email: str = ""
    password: str = ""
    profile: str = ""

    @field_validator("email", "password", "profile")
    @classmethod
    def drop_unexpanded(cls, value: str) -> str:
        # ${VAR} survives expansion when VAR is unset
        if value.startswith("${") and value.endswith("}"):
            return ""
        return value


# Session Configuration
class EndpointsConfig(BaseModel):
    """Service endpoint paths, relative to ``session.base_url``."""

    login: str = "/login"
    profiles: str = "/api/shakti/mre/profiles"
    switch_profile: str = "/api/shakti/mre/profiles/switch"
    rating_history: str = "/api/shakti/mre/ratinghistory"
    set_rating: str = "/api/shakti/mre/setVideoRating"


class SessionConfig(BaseModel):
    """Account service connection configuration."""

    base_url: str = "https://www.netflix.com"
    timeout: float = 30.0  # Seconds per request
    max_retries: int = 3
    backoff_factor: float = 2.0
    page_size: int = 100  # Ratings per history page
    user_agent: str = "netflix-migrate"
    endpoints: EndpointsConfig = Field(default_factory=EndpointsConfig)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("max_retries", "page_size")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"Must be at least 1, got {value}")
        return value


# Import / Export Configuration
class ImportConfig(BaseModel):
    """Rating import configuration."""

    delay_ms: int = 100  # Minimum time per rating update

    @field_validator("delay_ms")
    @classmethod
    def validate_delay(cls, value: int) -> int:
        if value < 0:
            raise ValueError(f"delay_ms must be >= 0, got {value}")
        return value


class ExportConfig(BaseModel):
    """Rating export configuration."""

    indent: int | None = None  # None writes compact JSON

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, value: int | None) -> int | None:
        if value is not None and value < 0:
            raise ValueError(f"indent must be >= 0, got {value}")
        return value


# Main Settings
class Settings(BaseModel):
    """Main configuration settings."""

    model_config = ConfigDict(populate_by_name=True)

    account: AccountConfig = Field(default_factory=AccountConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    import_: ImportConfig = Field(default_factory=ImportConfig, alias="import")
    export: ExportConfig = Field(default_factory=ExportConfig)


def load_settings(base_dir: Path | str) -> Settings:
    """Load settings from ``config/config.yaml`` under ``base_dir``.

    A missing file yields default settings.

    Raises:
        ConfigurationError: If the file exists but is invalid.
    """
    config = load_config(base_dir)
    try:
        return Settings(
            account=AccountConfig(**config.get("account", {})),
            session=SessionConfig(**config.get("session", {})),
            import_=ImportConfig(**config.get("import", {})),
            export=ExportConfig(**config.get("export", {})),
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


__all__ = [
    "Settings",
    "load_settings",
    "AccountConfig",
    "SessionConfig",
    "EndpointsConfig",
    "ImportConfig",
    "ExportConfig",
]
