"""Config package."""

from rssreport.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
