"""Configuration package."""

from ghsearch.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
