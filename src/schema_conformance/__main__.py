"""CLI entry-point for schema_conformance.

Usage:
    python -m schema_conformance examples --schemas <dir> --examples <dir>
    python -m schema_conformance invalid --schemas <dir> --invalid <dir>
    python -m schema_conformance all --schemas <dir> [--examples <dir>] [--invalid <dir>]

Common flags: --json, --draft {3,4,6,7,2019-09,2020-12}, --follow-symlinks,
--no-formats, -v/--verbose.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from schema_conformance import __version__
from schema_conformance.api import run_conformance
from schema_conformance.core.config import SUPPORTED_DRAFTS, ConformanceConfig
from schema_conformance.diagnostics import (
    CollectingDiagnostics,
    LoggingDiagnostics,
    TeeDiagnostics,
)
from schema_conformance.model.outcome import ConformanceReport
from schema_conformance.utils.exit_codes import ExitCode
from schema_conformance.utils.json_norm import stable_json_dump


def _print_human(report: ConformanceReport) -> None:
    """Pretty-print a one-run summary to stderr."""
    check = report.check.to_dict()
    status = "PASS" if report.ok else "FAIL"
    print(
        f"\n{status}  {report.mode.value}: {report.target_dir.as_posix()}",
        file=sys.stderr,
    )
    print(
        f"   Schemas  : {report.schema_count} loaded"
        + ("" if report.load_ok else " (with load errors)"),
        file=sys.stderr,
    )
    print(
        f"   Documents: {check['files']} checked, "
        f"{check['passed']} passed, {check['failed']} failed",
        file=sys.stderr,
    )
    failures = report.check.failures
    for f in failures[:10]:
        kind = f.kind.value if f.kind is not None else "?"
        print(f"      • {kind} → {f.relative_path}", file=sys.stderr)
    if len(failures) > 10:
        print(f"      … and {len(failures) - 10} more", file=sys.stderr)
    print("", file=sys.stderr)


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--schemas",
        dest="schema_dir",
        type=Path,
        required=True,
        help="Root directory of *.schema.json files.",
    )
    common.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the full conformance report JSON to stdout.",
    )
    common.add_argument(
        "--draft",
        choices=SUPPORTED_DRAFTS,
        default=None,
        help="Draft for schemas without $schema (default: 7, "
        "or $SCHEMA_CONFORMANCE_DRAFT).",
    )
    common.add_argument(
        "--follow-symlinks",
        dest="follow_symlinks",
        action="store_true",
        default=None,
        help="Follow symlinked directories and files while walking.",
    )
    common.add_argument(
        "--no-formats",
        dest="check_formats",
        action="store_false",
        default=None,
        help="Do not assert the 'format' keyword.",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Also log loaded schemas and passing documents.",
    )
    return common


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="schema-conformance",
        description="Check that examples validate and invalid examples do not.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = p.add_subparsers(dest="command")
    common = _common_options()

    # ── examples subcommand ─────────────────────────────────────────
    ex_p = sub.add_parser(
        "examples",
        parents=[common],
        help="Every document under --examples must validate.",
    )
    ex_p.add_argument("--examples", dest="examples_dir", type=Path, required=True)

    # ── invalid subcommand ──────────────────────────────────────────
    inv_p = sub.add_parser(
        "invalid",
        parents=[common],
        help="Every document under --invalid must fail validation.",
    )
    inv_p.add_argument("--invalid", dest="invalid_dir", type=Path, required=True)

    # ── all subcommand ──────────────────────────────────────────────
    all_p = sub.add_parser(
        "all",
        parents=[common],
        help="Run the examples check, then the invalid check.",
    )
    all_p.add_argument("--examples", dest="examples_dir", type=Path, default=None)
    all_p.add_argument("--invalid", dest="invalid_dir", type=Path, default=None)

    return p


def _runs(args: argparse.Namespace) -> list[tuple[Path, bool]]:
    runs: list[tuple[Path, bool]] = []
    if args.command in ("examples", "all") and args.examples_dir is not None:
        runs.append((args.examples_dir, True))
    if args.command in ("invalid", "all") and args.invalid_dir is not None:
        runs.append((args.invalid_dir, False))
    return runs


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = conformant, 1 = violation, 2 = error)."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_usage(sys.stderr)
        print("error: please choose a subcommand.", file=sys.stderr)
        return ExitCode.ERROR

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s",
        stream=sys.stderr,
    )

    runs = _runs(args)
    if not runs:
        print("error: 'all' needs --examples and/or --invalid.", file=sys.stderr)
        return ExitCode.ERROR

    try:
        config = ConformanceConfig.from_env(
            default_draft=args.draft,
            follow_symlinks=args.follow_symlinks,
            check_formats=args.check_formats,
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    reports: list[dict] = []
    ok = True
    for target_dir, expect_valid in runs:
        collected = CollectingDiagnostics()
        sink = TeeDiagnostics([LoggingDiagnostics(), collected])
        try:
            report = run_conformance(
                args.schema_dir,
                target_dir,
                expect_valid=expect_valid,
                config=config,
                diagnostics=sink,
            )
        except OSError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return ExitCode.ERROR

        _print_human(report)
        ok = ok and report.ok
        entry = report.to_dict()
        entry["diagnostics"] = [d.to_dict() for d in collected.failures]
        reports.append(entry)

    if args.json_out:
        stable_json_dump({"ok": ok, "runs": reports}, sys.stdout)

    return ExitCode.from_verdict(ok)


if __name__ == "__main__":
    raise SystemExit(main())
