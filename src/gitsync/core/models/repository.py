"""Repository configuration models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel

from gitsync.utils.source_dir import decode_source_dir

DEFAULT_BASE_DIR = ".git/gitsync"


class RepositoryEntry(BaseModel):
    """Mapping between a monorepo sub-directory and an external repository.

    ``source_dir`` holds the raw specifier as written in the config file.
    The display path, real path and label are derived from it on access.
    Keys this model does not know about are kept in ``options``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    source_dir: str
    target: str
    repo_dir: str | None = None

    # Synchronization options, forwarded untouched
    target_dir: str | None = None
    add_tag_prefix: str | None = None
    remove_tag_prefix: str | None = None
    squash: bool | None = None
    squash_base_branch: str | None = None
    max_count: int | None = None
    preserve_commit: bool | None = None
    after: str | None = None
    before: str | None = None
    include_branches: list[str] | None = None
    exclude_branches: list[str] | None = None
    include_tags: list[str] | None = None
    exclude_tags: list[str] | None = None
    no_tags: bool | None = None

    options: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_unknown_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        known: set[str] = set()
        for name, field in cls.model_fields.items():
            known.add(name)
            if field.alias:
                known.add(field.alias)
        derived: set[str] = set()
        for name, field in cls.model_computed_fields.items():
            derived.add(name)
            if field.alias:
                derived.add(field.alias)

        values: dict[str, Any] = {}
        unknown: dict[str, Any] = {}
        for key, value in data.items():
            if key in derived:
                continue
            if key in known:
                values[key] = value
            else:
                unknown[key] = value

        if unknown:
            values["options"] = {**values.get("options", {}), **unknown}
        return values

    @computed_field(alias="displaySourceDir")  # type: ignore[prop-decorator]
    @property
    def display_source_dir(self) -> str:
        return decode_source_dir(self.source_dir).display

    @computed_field(alias="realSourceDir")  # type: ignore[prop-decorator]
    @property
    def real_source_dir(self) -> str:
        return decode_source_dir(self.source_dir).real

    @property
    def label(self) -> str | None:
        """Custom name written after the first unescaped ``#``, if any."""
        return decode_source_dir(self.source_dir).label


class Configuration(BaseModel):
    """Root of the ``.gitsync.json`` configuration file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    base_dir: str = DEFAULT_BASE_DIR
    repos: list[RepositoryEntry] = Field(default_factory=list)
