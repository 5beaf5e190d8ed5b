"""Thin wrapper around the git CLI using subprocess."""

import subprocess
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


class GitClient:
    """Runs git subcommands.

    Uses subprocess + git CLI directly (no gitpython dependency). Failures
    surface as the ``subprocess`` exceptions and are never retried.
    """

    def __init__(self, executable: str = "git", timeout: float | None = None) -> None:
        self._executable = executable
        self._timeout = timeout

    def run(self, *args: str, cwd: str | Path | None = None) -> str:
        """Run a git command and return stripped stdout."""
        logger.debug("Running git", args=list(args), cwd=str(cwd) if cwd else None)
        result = subprocess.run(
            [self._executable, *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
            timeout=self._timeout,
        )
        return result.stdout.strip()

    def get_remote_url(self, directory: str | Path) -> str:
        """Get the configured ``origin`` URL of a working copy."""
        return self.run("config", "--get", "remote.origin.url", cwd=directory)

    def is_bare_repository(self, directory: str | Path) -> bool:
        return self.run("rev-parse", "--is-bare-repository", cwd=directory) == "true"

    def clone(self, url: str, directory: str | Path) -> None:
        """Clone ``url`` into ``directory``, which must be missing or empty."""
        logger.info("Cloning repository", url=url, directory=str(directory))
        self.run("clone", url, str(directory))
