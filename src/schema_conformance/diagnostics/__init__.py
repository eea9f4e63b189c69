"""
Conformance Diagnostics Module
==============================
Structured reporting sinks for schema loading and document checks.
"""

from .sinks import (
    CollectingDiagnostics,
    Diagnostic,
    DiagnosticsSink,
    LoggingDiagnostics,
    TeeDiagnostics,
)

__all__ = [
    "CollectingDiagnostics",
    "Diagnostic",
    "DiagnosticsSink",
    "LoggingDiagnostics",
    "TeeDiagnostics",
]
