"""Diagnostics sinks: where a run reports what it saw.

The loader and checker never print. They hand a :class:`Diagnostic` to an
injected sink; the CLI uses :class:`LoggingDiagnostics`, tests and JSON
reports use :class:`CollectingDiagnostics`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional, Protocol, Tuple

from schema_conformance.model import DiagnosticKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """One reportable event of a conformance run."""

    kind: DiagnosticKind
    path: Optional[Path]
    message: str
    schema_key: Optional[str] = None
    errors: Tuple[dict, ...] = field(default_factory=tuple)

    @property
    def is_failure(self) -> bool:
        return self.kind.is_failure

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "path": self.path.as_posix() if self.path is not None else None,
            "message": self.message,
            "schema_key": self.schema_key,
            "errors": [dict(e) for e in self.errors],
        }


class DiagnosticsSink(Protocol):
    """Anything that accepts diagnostics."""

    def emit(self, diagnostic: Diagnostic) -> None:
        ...


class LoggingDiagnostics:
    """Render diagnostics through :mod:`logging`.

    Failures go out at ERROR, everything else at INFO, in the
    ``<path>:0: <reason>`` shape editors and CI annotators can jump to.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def emit(self, diagnostic: Diagnostic) -> None:
        kind = diagnostic.kind
        if kind is DiagnosticKind.VALIDATION_MISMATCH and diagnostic.schema_key:
            self.log.error("Schema: %s", diagnostic.schema_key)

        if kind is DiagnosticKind.WALK_WARNING:
            self.log.warning("%s", diagnostic.message)
        elif diagnostic.is_failure:
            self.log.error("%s", diagnostic.message)
        else:
            self.log.info("%s", diagnostic.message)

        for err in diagnostic.errors:
            self.log.error(
                "  %s: %s", err.get("location", "root"), err.get("message", "")
            )


class CollectingDiagnostics:
    """Keep every diagnostic in memory, in emission order."""

    def __init__(self) -> None:
        self.items: List[Diagnostic] = []

    def emit(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)

    def of_kind(self, *kinds: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self.items if d.kind in kinds]

    @property
    def failures(self) -> List[Diagnostic]:
        return [d for d in self.items if d.is_failure]

    def messages(self) -> List[str]:
        return [d.message for d in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


class TeeDiagnostics:
    """Forward each diagnostic to several sinks (e.g. log + collect)."""

    def __init__(self, sinks: Iterable[DiagnosticsSink]):
        self.sinks = list(sinks)

    def emit(self, diagnostic: Diagnostic) -> None:
        for sink in self.sinks:
            sink.emit(diagnostic)
