"""Exit-code contract for the conformance CLI.

Code  Meaning
----  -------
  0   Success — every schema loaded, every document matched its polarity
  1   Violation — at least one load failure, resolution failure or mismatch
  2   Error — usage error, missing or unreadable root directory
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2

    @classmethod
    def from_verdict(cls, ok: bool) -> "ExitCode":
        return cls.SUCCESS if ok else cls.VIOLATION
