"""Tests for the git CLI wrapper."""

import subprocess
from pathlib import Path

import pytest

from gitsync.git.client import GitClient


@pytest.mark.unit
class TestGitClient:
    """Tests for GitClient."""

    def test_is_bare_repository(self, git_repo: Path, bare_repo: Path) -> None:
        git = GitClient()
        assert git.is_bare_repository(git_repo) is False
        assert git.is_bare_repository(bare_repo) is True

    def test_clone_and_remote_url(self, bare_repo: Path, tmp_path: Path) -> None:
        git = GitClient()
        clone_dir = tmp_path / "clone"
        git.clone(str(bare_repo), clone_dir)
        assert (clone_dir / "README.md").exists()
        assert git.get_remote_url(clone_dir) == str(bare_repo)

    def test_missing_remote_fails(self, git_repo: Path) -> None:
        with pytest.raises(subprocess.CalledProcessError):
            GitClient().get_remote_url(git_repo)

    def test_missing_executable_fails(self, git_repo: Path) -> None:
        with pytest.raises(FileNotFoundError):
            GitClient(executable="git-does-not-exist").run("status", cwd=git_repo)

    def test_run_strips_output(self, git_repo: Path) -> None:
        assert GitClient().run("rev-parse", "--is-inside-work-tree", cwd=git_repo) == "true"
