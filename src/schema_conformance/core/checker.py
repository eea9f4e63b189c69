"""Conformance checker — judge every document under a target root.

Each candidate moves through ``DISCOVERED -> PARSED -> SCHEMA_RESOLVED ->
VALIDATED -> JUDGED``. A parse or resolve failure stops it in ``FAILED``.
Whatever happens to one file, the walk continues and every file adds
exactly one outcome to the aggregate.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from schema_conformance.contracts.registry import SchemaRegistry
from schema_conformance.core.config import ConformanceConfig
from schema_conformance.core.discover import iter_documents, relative_key, require_root
from schema_conformance.core.loader import read_json
from schema_conformance.core.resolver import resolve
from schema_conformance.diagnostics import Diagnostic, DiagnosticsSink, LoggingDiagnostics
from schema_conformance.exceptions import (
    ConformanceError,
    DocumentParseError,
    ResolutionError,
    SchemaRegistrationError,
    ValidationMismatch,
)
from schema_conformance.model import DiagnosticKind, FailureKind, Stage
from schema_conformance.model.outcome import CheckResult, FileOutcome
from schema_conformance.model.resolution import NotFound

_logger = logging.getLogger(__name__)


def parse_document(path: Path) -> Any:
    try:
        return read_json(path)
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise DocumentParseError(path, str(exc)) from exc


def check_file(
    registry: SchemaRegistry,
    target_root: Path,
    path: Path,
    expect_valid: bool,
    config: ConformanceConfig | None = None,
) -> FileOutcome:
    """Judge one document, returning its passing outcome.

    Raises a :class:`ConformanceError` subclass for every way the document
    can fail; :func:`check_documents` turns those into outcomes.
    """
    cfg = config or registry.config
    rel = relative_key(path, target_root)

    document = parse_document(path)

    resolution = resolve(registry, rel, cfg)
    if isinstance(resolution, NotFound):
        raise ResolutionError(path, resolution.directory_key, resolution.filename_key)

    valid, errors = resolution.schema.check(document)

    if valid != expect_valid:
        raise ValidationMismatch(
            path,
            resolution.key,
            expect_valid=expect_valid,
            errors=errors if expect_valid else (),
        )

    return FileOutcome(
        path=path,
        relative_path=rel,
        stage=Stage.JUDGED,
        passed=True,
        schema_key=resolution.key,
        message=f"Pass: {path}",
        reached=Stage.VALIDATED,
    )


def check_documents(
    registry: SchemaRegistry,
    target_root: str | Path,
    expect_valid: bool,
    *,
    config: ConformanceConfig | None = None,
    diagnostics: DiagnosticsSink | None = None,
) -> CheckResult:
    """Check every candidate under *target_root* against *registry*.

    Never stops early: the returned ``CheckResult`` holds one outcome per
    candidate, in traversal order, and the folded verdict.
    """
    cfg = config or registry.config
    sink = diagnostics if diagnostics is not None else LoggingDiagnostics()
    root = require_root(Path(target_root))
    result = CheckResult(expect_valid=expect_valid)

    def _walk_warning(path: Path, exc: OSError) -> None:
        sink.emit(
            Diagnostic(
                kind=DiagnosticKind.WALK_WARNING,
                path=path,
                message=f"{path}:0: skipped unreadable directory: {exc}",
            )
        )

    for path in iter_documents(root, cfg, on_warning=_walk_warning):
        try:
            outcome = check_file(registry, root, path, expect_valid, cfg)
        except ConformanceError as exc:
            outcome = _failed_outcome(path, relative_key(path, root), exc)

        sink.emit(_outcome_diagnostic(outcome))
        result.record(outcome)

    _logger.debug(
        "checked %d document(s) under %s (ok=%s)", len(result.outcomes), root, result.ok
    )
    return result


def check(
    registry: SchemaRegistry,
    target_root: str | Path,
    expect_valid: bool,
    *,
    config: ConformanceConfig | None = None,
    diagnostics: DiagnosticsSink | None = None,
) -> bool:
    """Boolean verdict of :func:`check_documents`."""
    return check_documents(
        registry, target_root, expect_valid, config=config, diagnostics=diagnostics
    ).ok


# ── helpers ─────────────────────────────────────────────────────────


def _failed_outcome(path: Path, rel: str, exc: ConformanceError) -> FileOutcome:
    if isinstance(exc, ValidationMismatch):
        return FileOutcome(
            path=path,
            relative_path=rel,
            stage=Stage.JUDGED,
            passed=False,
            kind=FailureKind.VALIDATION_MISMATCH,
            schema_key=exc.schema_key,
            message=str(exc),
            errors=exc.errors,
            reached=exc.reached,
        )
    if isinstance(exc, ResolutionError):
        schema_key = exc.filename_key
    elif isinstance(exc, SchemaRegistrationError):
        schema_key = exc.key
    else:
        schema_key = None
    if isinstance(exc, (DocumentParseError, SchemaRegistrationError)):
        message = f"{path}:0: error validating: {exc}"
    else:
        message = str(exc)
    return FileOutcome(
        path=path,
        relative_path=rel,
        stage=Stage.FAILED,
        passed=False,
        kind=exc.kind,
        schema_key=schema_key,
        message=message,
        reached=exc.reached,
    )


def _outcome_diagnostic(outcome: FileOutcome) -> Diagnostic:
    kind = DiagnosticKind.PASSED if outcome.passed else DiagnosticKind(outcome.kind.value)
    return Diagnostic(
        kind=kind,
        path=outcome.path,
        message=outcome.message,
        schema_key=outcome.schema_key,
        errors=outcome.errors,
    )
