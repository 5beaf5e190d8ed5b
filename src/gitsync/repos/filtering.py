"""Glob-based selection of configured repositories."""

from collections.abc import Sequence

import structlog
from wcmatch import glob

from gitsync.core.models.repository import RepositoryEntry

logger = structlog.get_logger(__name__)

MATCH_ALL = "**"
GLOB_FLAGS = glob.GLOBSTAR | glob.NEGATE


def build_patterns(
    include: Sequence[str] = (),
    exclude: Sequence[str] = (),
) -> list[str]:
    """Combine include and exclude patterns into one glob pattern set.

    Excludes become negated patterns, which veto any include match. With
    no include patterns everything is included before the excludes apply.
    """
    patterns = list(include) or [MATCH_ALL]
    patterns += [f"!{pattern}" for pattern in exclude]
    return patterns


def matches(path: str, patterns: Sequence[str]) -> bool:
    """Match a whole path against a glob pattern set.

    ``*`` stays within one path segment and ``**`` spans segments.
    """
    return glob.globmatch(path, list(patterns), flags=GLOB_FLAGS)


def filter_repos(
    repos: Sequence[RepositoryEntry],
    include: Sequence[str] = (),
    exclude: Sequence[str] = (),
) -> list[RepositoryEntry]:
    """Return the repos whose display source dir matches the patterns.

    Configured order is preserved. An empty result is logged as a warning,
    not raised.
    """
    if not include and not exclude:
        return list(repos)

    patterns = build_patterns(include, exclude)
    result = [repo for repo in repos if matches(repo.display_source_dir, patterns)]

    if not result:
        logger.warning(
            "No repositories matched filters",
            include=list(include),
            exclude=list(exclude),
            configured=len(repos),
        )
    return result
