"""Exception hierarchy for gitsync."""

from typing import Any


class GitSyncError(Exception):
    """Base exception for all gitsync errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(GitSyncError):
    """Raised when the configuration file cannot be read or is invalid."""


class ConfigNotFoundError(ConfigurationError):
    """Raised when a caller requires the configuration file and it is absent."""


class RepositoryNotFoundError(GitSyncError):
    """Raised when no configured repository matches a source directory."""


class RemoteMismatchError(GitSyncError):
    """Raised when a local working copy tracks a different remote than expected."""
