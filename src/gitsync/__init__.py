"""gitsync-config: repository routing for monorepo synchronization."""

__version__ = "0.1.0"
