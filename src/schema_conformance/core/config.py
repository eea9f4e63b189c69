"""Conformance run configuration dataclass."""

from __future__ import annotations

import os
from dataclasses import dataclass

SUPPORTED_DRAFTS = ("3", "4", "6", "7", "2019-09", "2020-12")

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ConformanceConfig:
    """Immutable naming conventions and engine options for a run.

    The defaults reproduce the corpus layout: schemas end in
    ``.schema.json``, documents in ``.json``, editor backups in ``~``.
    """

    schema_suffix: str = ".schema.json"
    document_suffix: str = ".json"
    backup_marker: str = "~"
    default_draft: str = "7"  # used when a schema has no $schema
    follow_symlinks: bool = False
    check_formats: bool = True

    def __post_init__(self) -> None:
        if self.default_draft not in SUPPORTED_DRAFTS:
            raise ValueError(
                f"unsupported draft {self.default_draft!r}; "
                f"expected one of: {', '.join(SUPPORTED_DRAFTS)}"
            )
        if not self.schema_suffix:
            raise ValueError("schema_suffix must not be empty")

    @classmethod
    def from_env(cls, **overrides: object) -> "ConformanceConfig":
        """Build a config from ``SCHEMA_CONFORMANCE_*`` env vars.

        Explicit *overrides* (e.g. from CLI flags) win over the environment;
        ``None`` values are ignored.
        """
        values: dict[str, object] = {}
        draft = os.getenv("SCHEMA_CONFORMANCE_DRAFT", "")
        if draft:
            values["default_draft"] = draft
        follow = os.getenv("SCHEMA_CONFORMANCE_FOLLOW_SYMLINKS", "")
        if follow:
            values["follow_symlinks"] = follow.lower() in _TRUTHY
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)  # type: ignore[arg-type]
