"""Schema loader — fill a registry from every schema file under a root."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from schema_conformance.contracts.registry import SchemaRegistry
from schema_conformance.core.config import ConformanceConfig
from schema_conformance.core.discover import iter_schema_files, relative_key, require_root
from schema_conformance.diagnostics import Diagnostic, DiagnosticsSink, LoggingDiagnostics
from schema_conformance.exceptions import (
    ConformanceError,
    SchemaParseError,
    SchemaRegistrationError,
)
from schema_conformance.model import DiagnosticKind

_logger = logging.getLogger(__name__)


def read_json(path: Path) -> Any:
    """Parse *path* as JSON; raises ``ValueError``/``OSError`` unchanged."""
    return json.loads(path.read_text(encoding="utf-8"))


def load_schema(registry: SchemaRegistry, schema_root: Path, key: str) -> None:
    """Parse the schema at *schema_root*/*key* and register it under *key*."""
    schema_path = schema_root / key
    try:
        schema = read_json(schema_path)
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise SchemaParseError(schema_path, str(exc)) from exc
    registry.add(key, schema)


def load_all(
    schema_root: str | Path,
    *,
    config: ConformanceConfig | None = None,
    diagnostics: DiagnosticsSink | None = None,
) -> tuple[SchemaRegistry, bool]:
    """Register every ``*.schema.json`` file under *schema_root*.

    Returns the sealed registry and whether every schema loaded. A broken
    schema is reported and skipped; the walk always completes.

    Raises ``FileNotFoundError`` / ``NotADirectoryError`` /
    ``PermissionError`` when *schema_root* itself cannot be walked.
    """
    config = config or ConformanceConfig()
    sink = diagnostics if diagnostics is not None else LoggingDiagnostics()
    root = require_root(Path(schema_root))
    registry = SchemaRegistry(config)
    ok = True

    def _walk_warning(path: Path, exc: OSError) -> None:
        sink.emit(
            Diagnostic(
                kind=DiagnosticKind.WALK_WARNING,
                path=path,
                message=f"{path}:0: skipped unreadable directory: {exc}",
            )
        )

    for schema_path in iter_schema_files(root, config, on_warning=_walk_warning):
        key = relative_key(schema_path, root)
        sink.emit(
            Diagnostic(
                kind=DiagnosticKind.SCHEMA_LOADED,
                path=schema_path,
                message=f"Load: {key}",
                schema_key=key,
            )
        )
        try:
            load_schema(registry, root, key)
        except (SchemaParseError, SchemaRegistrationError) as exc:
            ok = False
            sink.emit(_load_failure(schema_path, key, exc))

    registry.seal()
    _logger.debug("loaded %d schema(s) from %s (ok=%s)", len(registry), root, ok)
    return registry, ok


def _load_failure(path: Path, key: str, exc: ConformanceError) -> Diagnostic:
    kind = (
        DiagnosticKind.SCHEMA_PARSE
        if isinstance(exc, SchemaParseError)
        else DiagnosticKind.SCHEMA_REGISTRATION
    )
    return Diagnostic(
        kind=kind,
        path=path,
        message=f"{path}:0: error loading {exc}",
        schema_key=key,
    )
