"""Configuration: process settings, logging and the repository config file."""

from gitsync.config.logging import configure_logging
from gitsync.config.settings import Settings, get_settings
from gitsync.config.store import Config, load_configuration

__all__ = [
    "Config",
    "Settings",
    "configure_logging",
    "get_settings",
    "load_configuration",
]
