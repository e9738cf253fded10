"""Configuration package."""

from gh_activity.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
