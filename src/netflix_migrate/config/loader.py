"""Configuration loading utilities."""

import os
from pathlib import Path
from typing import Any

import yaml

from netflix_migrate.core.exceptions import ConfigurationError


def config_path(base_dir: Path | str) -> Path:
    """Return the location of the configuration file under ``base_dir``."""
    return Path(base_dir) / "config" / "config.yaml"


def _expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in configuration."""
    if isinstance(data, dict):
        return {k: _expand_env_vars(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_expand_env_vars(item) for item in data]
    if isinstance(data, str):
        return os.path.expandvars(data)
    return data


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file with environment variable expansion."""
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Configuration file {path} is not valid YAML: {e}") from e
    data = _expand_env_vars(data)
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping at the top level.")
    return data


def load_config(base_dir: Path | str) -> dict[str, Any]:
    """Load the raw configuration mapping, or an empty one if no file exists."""
    path = config_path(base_dir)
    if not path.exists():
        return {}
    return _load_yaml(path)


__all__ = ["config_path", "load_config", "_expand_env_vars", "_load_yaml"]
