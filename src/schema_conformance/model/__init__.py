"""Enums shared across the loader, checker and reporting layers."""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Why a schema or document did not conform."""

    SCHEMA_PARSE = "schema_parse"
    SCHEMA_REGISTRATION = "schema_registration"
    DOCUMENT_PARSE = "document_parse"
    RESOLUTION = "resolution"
    VALIDATION_MISMATCH = "validation_mismatch"


class DiagnosticKind(str, Enum):
    """Every event a diagnostics sink can receive."""

    SCHEMA_LOADED = "schema_loaded"
    SCHEMA_PARSE = FailureKind.SCHEMA_PARSE.value
    SCHEMA_REGISTRATION = FailureKind.SCHEMA_REGISTRATION.value
    DOCUMENT_PARSE = FailureKind.DOCUMENT_PARSE.value
    RESOLUTION = FailureKind.RESOLUTION.value
    VALIDATION_MISMATCH = FailureKind.VALIDATION_MISMATCH.value
    PASSED = "passed"
    WALK_WARNING = "walk_warning"

    @property
    def is_failure(self) -> bool:
        return self.value in _FAILURE_VALUES


_FAILURE_VALUES = frozenset(k.value for k in FailureKind)


class Stage(str, Enum):
    """Per-document lifecycle.

    ``DISCOVERED -> PARSED -> SCHEMA_RESOLVED -> VALIDATED -> JUDGED``, with
    ``FAILED`` reachable only from the parse and resolve steps. Outcomes
    carry their terminal stage and the last stage completed before it.
    """

    DISCOVERED = "discovered"
    PARSED = "parsed"
    SCHEMA_RESOLVED = "schema_resolved"
    VALIDATED = "validated"
    JUDGED = "judged"
    FAILED = "failed"


class Mode(str, Enum):
    """Expected polarity of a conformance run."""

    EXAMPLES = "examples"
    INVALID = "invalid"

    @property
    def expect_valid(self) -> bool:
        return self is Mode.EXAMPLES

    @classmethod
    def from_expect_valid(cls, expect_valid: bool) -> "Mode":
        return cls.EXAMPLES if expect_valid else cls.INVALID
