"""Per-document outcomes and the aggregate results built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from . import FailureKind, Mode, Stage


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """Judgement for a single candidate document.

    Every candidate contributes exactly one outcome, whether it was judged
    or stopped in ``Stage.FAILED``; ``reached`` is the last stage it
    completed before that.
    """

    path: Path
    relative_path: str
    stage: Stage
    passed: bool
    kind: FailureKind | None = None
    schema_key: str | None = None
    message: str = ""
    errors: tuple[dict[str, Any], ...] = ()
    reached: Stage = Stage.DISCOVERED

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "path": self.path.as_posix(),
            "relative_path": self.relative_path,
            "stage": self.stage.value,
            "reached": self.reached.value,
            "passed": self.passed,
        }
        if self.kind is not None:
            d["kind"] = self.kind.value
        if self.schema_key is not None:
            d["schema_key"] = self.schema_key
        if self.message:
            d["message"] = self.message
        if self.errors:
            d["errors"] = [dict(e) for e in self.errors]
        return d


@dataclass(slots=True)
class CheckResult:
    """Outcomes of one checker pass, in traversal order."""

    expect_valid: bool
    outcomes: list[FileOutcome] = field(default_factory=list)
    ok: bool = True

    def record(self, outcome: FileOutcome) -> None:
        """Fold *outcome* into the aggregate without short-circuiting."""
        self.outcomes.append(outcome)
        self.ok = self.ok and outcome.passed

    @property
    def failures(self) -> list[FileOutcome]:
        return [o for o in self.outcomes if not o.passed]

    def to_dict(self) -> dict[str, Any]:
        failed = len(self.failures)
        return {
            "expect_valid": self.expect_valid,
            "files": len(self.outcomes),
            "passed": len(self.outcomes) - failed,
            "failed": failed,
            "ok": self.ok,
            "results": [o.to_dict() for o in self.outcomes],
        }


@dataclass(slots=True)
class ConformanceReport:
    """Load phase plus check phase for one entry-point invocation."""

    mode: Mode
    schema_dir: Path
    target_dir: Path
    load_ok: bool
    schema_count: int
    check: CheckResult

    @property
    def ok(self) -> bool:
        return self.load_ok and self.check.ok

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "schema_dir": self.schema_dir.as_posix(),
            "target_dir": self.target_dir.as_posix(),
            "load_ok": self.load_ok,
            "schema_count": self.schema_count,
            "ok": self.ok,
            "check": self.check.to_dict(),
        }
