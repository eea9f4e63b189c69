"""
schema_conformance.api
======================

Programmatic entrypoints for running conformance checks.

Goals:
  - No argparse / CLI dependencies
  - Every run builds its own registry; nothing is shared between calls
  - Structured diagnostics through an injected sink

Usage::

    from schema_conformance.api import validate_example_files, validate_invalid_files

    ok = validate_example_files("schemas", "examples")
    ok = ok and validate_invalid_files("schemas", "invalid-examples")
"""

from __future__ import annotations

from pathlib import Path

from schema_conformance.core.checker import check_documents
from schema_conformance.core.config import ConformanceConfig
from schema_conformance.core.discover import require_root
from schema_conformance.core.loader import load_all
from schema_conformance.diagnostics import DiagnosticsSink, LoggingDiagnostics
from schema_conformance.model import Mode
from schema_conformance.model.outcome import ConformanceReport


def _to_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


# ── run_conformance ─────────────────────────────────────────────────


def run_conformance(
    schema_dir: str | Path,
    target_dir: str | Path,
    *,
    expect_valid: bool,
    config: ConformanceConfig | None = None,
    diagnostics: DiagnosticsSink | None = None,
) -> ConformanceReport:
    """Load every schema under *schema_dir*, then check *target_dir*.

    Parameters
    ----------
    schema_dir:
        Root of the ``*.schema.json`` tree.
    target_dir:
        Root of the documents to check.
    expect_valid:
        ``True`` when the documents must validate, ``False`` when each one
        must be rejected.
    config:
        Naming conventions and engine options; defaults to
        ``ConformanceConfig()``.
    diagnostics:
        Sink receiving every load and check event; defaults to logging.

    Returns
    -------
    ConformanceReport
        ``report.ok`` is true iff every schema loaded and every document
        matched the expected polarity.

    Raises
    ------
    FileNotFoundError / NotADirectoryError / PermissionError
        If either root cannot be walked. Both roots are checked before any
        work is done.
    """
    cfg = config or ConformanceConfig()
    sink = diagnostics if diagnostics is not None else LoggingDiagnostics()
    schema_root = require_root(_to_path(schema_dir))
    target_root = require_root(_to_path(target_dir))

    registry, load_ok = load_all(schema_root, config=cfg, diagnostics=sink)
    result = check_documents(
        registry, target_root, expect_valid, config=cfg, diagnostics=sink
    )
    return ConformanceReport(
        mode=Mode.from_expect_valid(expect_valid),
        schema_dir=schema_root,
        target_dir=target_root,
        load_ok=load_ok,
        schema_count=len(registry),
        check=result,
    )


# ── public entry points ─────────────────────────────────────────────


def validate_example_files(
    schema_dir: str | Path,
    examples_dir: str | Path,
    *,
    config: ConformanceConfig | None = None,
    diagnostics: DiagnosticsSink | None = None,
) -> bool:
    """True iff every schema loads and every example validates."""
    return run_conformance(
        schema_dir,
        examples_dir,
        expect_valid=True,
        config=config,
        diagnostics=diagnostics,
    ).ok


def validate_invalid_files(
    schema_dir: str | Path,
    invalid_dir: str | Path,
    *,
    config: ConformanceConfig | None = None,
    diagnostics: DiagnosticsSink | None = None,
) -> bool:
    """True iff every schema loads and every invalid example is rejected."""
    return run_conformance(
        schema_dir,
        invalid_dir,
        expect_valid=False,
        config=config,
        diagnostics=diagnostics,
    ).ok
