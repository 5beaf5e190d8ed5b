"""Map changed files to the repositories they belong to."""

from collections.abc import Iterable, Sequence

import structlog

from gitsync.core.models.repository import RepositoryEntry

logger = structlog.get_logger(__name__)


def _normalize(path: str) -> str:
    while path.startswith("./"):
        path = path[2:]
    return path.rstrip("/")


def is_under(path: str, directory: str) -> bool:
    """Check whether ``path`` is ``directory`` or lies below it.

    Compares whole path segments: ``packages/10/a`` is not under
    ``packages/1``.
    """
    path = _normalize(path)
    directory = _normalize(directory)
    if not directory:
        return True
    return path == directory or path.startswith(directory + "/")


def get_repos_by_files(
    changed_files: Iterable[str],
    repos: Sequence[RepositoryEntry],
) -> list[RepositoryEntry]:
    """Return the repos containing at least one of the changed files.

    Repos are keyed by display source dir, so each appears once, at the
    position where it first matched.
    """
    changed: dict[str, RepositoryEntry] = {}
    for file in changed_files:
        matched = False
        for repo in repos:
            if is_under(file, repo.real_source_dir):
                changed.setdefault(repo.display_source_dir, repo)
                matched = True
        if not matched:
            logger.debug("Changed file outside configured repositories", file=file)
    return list(changed.values())
