"""Shared utilities for schema_conformance."""

from schema_conformance.utils.exit_codes import ExitCode
from schema_conformance.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
