"""Error kinds raised inside a conformance run.

All of them are caught at the file they concern and turned into a
diagnostic plus a ``False`` contribution to the verdict; only a missing or
unreadable root directory escapes to the caller (as the builtin
``FileNotFoundError`` / ``NotADirectoryError`` / ``PermissionError``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from schema_conformance.model import FailureKind, Stage


class ConformanceError(Exception):
    """Base class for per-file conformance failures.

    ``reached`` is the last lifecycle stage a document completed before
    the failure was raised.
    """

    kind: FailureKind
    reached: Stage = Stage.DISCOVERED


class SchemaParseError(ConformanceError):
    """A schema file is not well-formed JSON."""

    kind = FailureKind.SCHEMA_PARSE

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error parsing: {path} {reason}")


class SchemaRegistrationError(ConformanceError):
    """The validation engine rejected a parsed schema."""

    kind = FailureKind.SCHEMA_REGISTRATION
    reached = Stage.SCHEMA_RESOLVED

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"schema {key} rejected: {reason}")


class DocumentParseError(ConformanceError):
    """A candidate document is not well-formed JSON."""

    kind = FailureKind.DOCUMENT_PARSE

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error parsing: {path} {reason}")


class ResolutionError(ConformanceError):
    """No registered schema governs a document."""

    kind = FailureKind.RESOLUTION
    reached = Stage.PARSED

    def __init__(self, path: Path, directory_key: str, filename_key: str) -> None:
        self.path = path
        self.directory_key = directory_key
        self.filename_key = filename_key
        super().__init__(f"While checking: {path}, failed to load: {filename_key}")


class ValidationMismatch(ConformanceError):
    """A document's validity did not match the expected polarity."""

    kind = FailureKind.VALIDATION_MISMATCH
    reached = Stage.VALIDATED

    def __init__(
        self,
        path: Path,
        schema_key: str,
        *,
        expect_valid: bool,
        errors: Sequence[dict[str, Any]] = (),
    ) -> None:
        self.path = path
        self.schema_key = schema_key
        self.expect_valid = expect_valid
        self.errors = tuple(errors)
        if expect_valid:
            msg = f"{path}:0: failed to validate"
        else:
            msg = f"{path}:0: validated when it should not have"
        super().__init__(msg)
