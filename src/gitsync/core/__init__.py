"""Core domain models and exceptions for gitsync."""

from gitsync.core.exceptions import (
    ConfigNotFoundError,
    ConfigurationError,
    GitSyncError,
    RemoteMismatchError,
    RepositoryNotFoundError,
)
from gitsync.core.models import Configuration, RepositoryEntry

__all__ = [
    # Models
    "Configuration",
    "RepositoryEntry",
    # Exceptions
    "GitSyncError",
    "ConfigurationError",
    "ConfigNotFoundError",
    "RepositoryNotFoundError",
    "RemoteMismatchError",
]
