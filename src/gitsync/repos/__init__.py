"""Repository selection: glob filtering and changed-file routing."""

from gitsync.repos.filtering import filter_repos
from gitsync.repos.routing import get_repos_by_files

__all__ = ["filter_repos", "get_repos_by_files"]
