"""Shared helpers for tests."""

import subprocess
from pathlib import Path


def run_git(*args: str, cwd: Path | None = None) -> str:
    """Run a git command in a test repository and return stdout."""
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()
