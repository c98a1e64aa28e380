"""netflix-migrate: export, import and migrate profile rating history."""

__version__ = "0.4.0"

__all__ = ["__version__"]
