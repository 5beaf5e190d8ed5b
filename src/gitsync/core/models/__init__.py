"""Domain models for gitsync."""

from gitsync.core.models.repository import (
    DEFAULT_BASE_DIR,
    Configuration,
    RepositoryEntry,
)

__all__ = [
    "DEFAULT_BASE_DIR",
    "Configuration",
    "RepositoryEntry",
]
