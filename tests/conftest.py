"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest
import structlog

from gitsync.config.settings import get_settings
from helpers import run_git


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host settings and git identity out of the tests."""
    for name in ("GITSYNC_BASE_DIR", "GITSYNC_CONFIG_FILE", "GITSYNC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@test.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@test.com")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty monorepo checkout directory."""
    root = tmp_path / "monorepo"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def write_config(workdir: Path):
    """Write ``.gitsync.json`` into the working directory."""

    def _write(data: dict) -> Path:
        path = workdir / ".gitsync.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git working tree with one commit."""
    repo_path = tmp_path / "test-repo"
    repo_path.mkdir()

    run_git("init", cwd=repo_path)
    (repo_path / "README.md").write_text("# Test Repo\n")
    run_git("add", ".", cwd=repo_path)
    run_git("commit", "-m", "Initial commit", cwd=repo_path)

    return repo_path


@pytest.fixture
def bare_repo(git_repo: Path, tmp_path: Path) -> Path:
    """Create a bare repository holding the history of ``git_repo``."""
    bare_path = tmp_path / "packages-1.git"
    run_git("clone", "--bare", str(git_repo), str(bare_path))
    return bare_path


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """An empty base directory for cloned working copies."""
    path = tmp_path / "cache"
    path.mkdir()
    return path
