"""Loading and access of the ``.gitsync.json`` configuration."""

from collections.abc import Iterable, Sequence
from pathlib import Path

import structlog
from pydantic import ValidationError

from gitsync.config.settings import Settings, get_settings
from gitsync.core.exceptions import (
    ConfigNotFoundError,
    ConfigurationError,
    RepositoryNotFoundError,
)
from gitsync.core.models.repository import Configuration, RepositoryEntry
from gitsync.git.client import GitClient
from gitsync.git.resolver import RepoDirResolver
from gitsync.repos.filtering import filter_repos
from gitsync.repos.routing import get_repos_by_files

logger = structlog.get_logger(__name__)


def load_configuration(path: str | Path) -> Configuration | None:
    """Read a configuration file, returning ``None`` when it does not exist."""
    path = Path(path)
    if not path.is_file():
        return None

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f'Invalid config file "{path}": {e}',
            details={"config_file": str(path)},
        ) from e

    try:
        return Configuration.model_validate_json(content)
    except ValidationError as e:
        raise ConfigurationError(
            f'Invalid config file "{path}": {e}',
            details={"config_file": str(path), "errors": e.errors(include_url=False)},
        ) from e


class Config:
    """Configuration snapshot for one process.

    The file is read once at construction. A missing file is not an error
    here; callers that need it call :meth:`check_file_exist`.
    """

    def __init__(
        self,
        config_file: str | Path | None = None,
        settings: Settings | None = None,
        git: GitClient | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._config_file = Path(config_file or self._settings.config_file)
        self._git = git or GitClient(
            executable=self._settings.git_executable,
            timeout=self._settings.git_timeout,
        )

        loaded = load_configuration(self._config_file)
        self._file_exists = loaded is not None
        self._config = loaded or Configuration()
        if self._settings.base_dir:
            self._config.base_dir = self._settings.base_dir

        logger.debug(
            "Configuration loaded",
            config_file=str(self._config_file),
            exists=self._file_exists,
            repos=len(self._config.repos),
        )

    @property
    def config_file(self) -> Path:
        return self._config_file

    def check_file_exist(self) -> None:
        """Raise if the configuration file was absent at load time."""
        if not self._file_exists:
            raise ConfigNotFoundError(
                f'Config file "{self._config_file}" does not exist.',
                details={"config_file": str(self._config_file)},
            )

    def get_repos(self) -> list[RepositoryEntry]:
        return self._config.repos

    def get_base_dir(self) -> str:
        return self._config.base_dir

    def set_base_dir(self, base_dir: str) -> None:
        self._config.base_dir = base_dir

    def get_repo_by_source_dir(self, source_dir: str) -> RepositoryEntry:
        """Find the first repo configured for ``source_dir``.

        Matches the raw specifier, the display path or the real path.
        """
        for repo in self._config.repos:
            if source_dir in (repo.source_dir, repo.display_source_dir, repo.real_source_dir):
                return repo
        raise RepositoryNotFoundError(
            f'Path "{source_dir}" does not exist in config file.',
            details={"source_dir": source_dir},
        )

    def filter_repos_by_source_dir(
        self,
        include: Sequence[str] = (),
        exclude: Sequence[str] = (),
    ) -> list[RepositoryEntry]:
        return filter_repos(self._config.repos, include, exclude)

    def get_repos_by_files(self, changed_files: Iterable[str]) -> list[RepositoryEntry]:
        return get_repos_by_files(changed_files, self._config.repos)

    def get_resolver(self) -> RepoDirResolver:
        """Create a resolver bound to the current base directory."""
        return RepoDirResolver(self.get_base_dir(), git=self._git)

    def get_repo_dir_by_repo(self, repo: RepositoryEntry, clone: bool = False) -> str:
        return self.get_resolver().resolve(repo, clone=clone)
