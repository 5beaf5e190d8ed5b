"""Git integration module for gitsync."""

from gitsync.git.client import GitClient
from gitsync.git.resolver import RepoDirResolver, ResolveResult

__all__ = ["GitClient", "RepoDirResolver", "ResolveResult"]
