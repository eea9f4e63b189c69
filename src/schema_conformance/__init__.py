"""schema_conformance — check a JSON-Schema corpus against its examples."""

__all__ = [
    "__version__",
    "run_conformance",
    "validate_example_files",
    "validate_invalid_files",
    "ConformanceConfig",
    # Diagnostics
    "CollectingDiagnostics",
    "LoggingDiagnostics",
]
__version__ = "0.1.0"

from schema_conformance.api import (  # noqa: E402, F401
    run_conformance,
    validate_example_files,
    validate_invalid_files,
)
from schema_conformance.core.config import ConformanceConfig  # noqa: E402, F401
from schema_conformance.diagnostics import (  # noqa: E402, F401
    CollectingDiagnostics,
    LoggingDiagnostics,
)
