"""Resolution of the local working directory for a repository's target."""

import re
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from gitsync.core.exceptions import GitSyncError, RemoteMismatchError
from gitsync.core.models.repository import RepositoryEntry
from gitsync.git.client import GitClient

logger = structlog.get_logger(__name__)


@dataclass
class ResolveResult:
    """Outcome of resolving several repositories, keyed by display source dir."""

    directories: dict[str, str] = field(default_factory=dict)
    errors: dict[str, Exception] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def derive_dir_name(target: str) -> str:
    """Derive a cache directory name from a remote URL or path.

    Takes the last path component (``/`` or the ``:`` of scp-like URLs)
    and strips a trailing ``.git``:

    - https://github.com/org/repo.git -> repo
    - git@github.com:repo.git -> repo
    - /srv/git/packages-1/ -> packages-1
    """
    name = re.split(r"[/:\\]", target.rstrip("/\\"))[-1]
    name = re.sub(r"\.git$", "", name)
    if not name:
        name = re.sub(r"[^\w.-]+", "-", target).strip("-")
    return name


def _is_non_empty_dir(path: Path) -> bool:
    return path.is_dir() and any(path.iterdir())


class RepoDirResolver:
    """Decides where the working copy of a repository's target lives.

    The resolver validates that a directory about to be reused tracks the
    expected remote and, when asked to, clones the target into a new or
    empty directory.
    """

    def __init__(self, base_dir: str, git: GitClient | None = None) -> None:
        self._base_dir = base_dir
        self._git = git or GitClient()

    @property
    def base_dir(self) -> str:
        return self._base_dir

    def resolve(self, repo: RepositoryEntry, clone: bool = False) -> str:
        """Return the working directory to synchronize ``repo`` with.

        Order of precedence:
        1. an explicit ``repo_dir``, validated and cloned into if requested;
        2. ``target`` itself, when it is a non-bare working tree;
        3. a directory under the base dir derived from ``target``.
        """
        target = repo.target

        if repo.repo_dir:
            self._validate(repo.repo_dir, target, explicit=True)
            if clone:
                self._clone_if_new(repo.repo_dir, target)
            return repo.repo_dir

        if Path(target).is_dir() and not self._git.is_bare_repository(target):
            logger.debug("Using target working tree", target=target)
            return target

        repo_dir = str(Path(self._base_dir) / derive_dir_name(target))
        self._validate(repo_dir, target, explicit=False)
        if clone:
            self._clone_if_new(repo_dir, target)
        return repo_dir

    def resolve_many(
        self,
        repos: Sequence[RepositoryEntry],
        clone: bool = False,
    ) -> ResolveResult:
        """Resolve each repo independently, collecting failures per repo."""
        result = ResolveResult()
        for repo in repos:
            key = repo.display_source_dir
            try:
                result.directories[key] = self.resolve(repo, clone=clone)
            except (GitSyncError, subprocess.SubprocessError, OSError) as e:
                logger.error("Failed to resolve repository", source_dir=key, error=str(e))
                result.errors[key] = e
        return result

    def _validate(self, repo_dir: str, target: str, explicit: bool) -> None:
        """Check that a reused directory tracks ``target`` as its origin."""
        path = Path(repo_dir)
        if not _is_non_empty_dir(path):
            return

        actual = self._git.get_remote_url(path)
        if self._same_remote(target, actual):
            return

        if explicit:
            hint = "please specify another `repoDir`"
        else:
            hint = "please specify `repoDir`"
        raise RemoteMismatchError(
            f'Expected repository remote URL of directory "{repo_dir}" is "{target}", '
            f'but got "{actual}", {hint} or delete directory "{repo_dir}"',
            details={"directory": repo_dir, "expected": target, "actual": actual},
        )

    @staticmethod
    def _same_remote(expected: str, actual: str) -> bool:
        if expected == actual:
            return True
        # git records local clone sources as absolute paths
        expected_path = Path(expected)
        if expected_path.exists():
            return expected_path.resolve() == Path(actual).resolve()
        return False

    def _clone_if_new(self, repo_dir: str, target: str) -> None:
        path = Path(repo_dir)
        path.mkdir(parents=True, exist_ok=True)
        if any(path.iterdir()):
            logger.debug("Reusing existing working copy", repo_dir=repo_dir)
            return
        self._git.clone(target, path)
