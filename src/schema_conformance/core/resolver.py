"""Document resolver — find the schema that governs a document.

Two tiers, directory first:

1. ``dirname(rel) + suffix``: one schema for every document in a directory
   (``group/a.json`` -> ``group.schema.json``).
2. ``rel`` with its trailing ``.json`` swapped for the suffix
   (``group/a.json`` -> ``group/a.schema.json``).

A top-level document has the dirname ``.``, so its directory key is
``..schema.json`` and only the filename tier can match it.
"""

from __future__ import annotations

import posixpath

from schema_conformance.contracts.registry import SchemaRegistry
from schema_conformance.core.config import ConformanceConfig
from schema_conformance.model.resolution import Found, NotFound, Resolution


def directory_key(relative_path: str, config: ConformanceConfig | None = None) -> str:
    cfg = config or ConformanceConfig()
    return (posixpath.dirname(relative_path) or ".") + cfg.schema_suffix


def filename_key(relative_path: str, config: ConformanceConfig | None = None) -> str:
    cfg = config or ConformanceConfig()
    if relative_path.endswith(cfg.document_suffix):
        return relative_path[: -len(cfg.document_suffix)] + cfg.schema_suffix
    return relative_path


def resolve(
    registry: SchemaRegistry,
    relative_path: str,
    config: ConformanceConfig | None = None,
) -> Resolution:
    """Return ``Found`` for the governing schema, else ``NotFound``."""
    cfg = config or registry.config
    dir_key = directory_key(relative_path, cfg)
    file_key = filename_key(relative_path, cfg)

    compiled = registry.get(dir_key)
    if compiled is not None:
        return Found(key=dir_key, schema=compiled, directory_level=True)

    compiled = registry.get(file_key)
    if compiled is not None:
        return Found(key=file_key, schema=compiled)

    return NotFound(directory_key=dir_key, filename_key=file_key)
