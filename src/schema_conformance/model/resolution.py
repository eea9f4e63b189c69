"""Resolution result: which schema governs a document, if any."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from schema_conformance.contracts.registry import CompiledSchema


@dataclass(frozen=True, slots=True)
class Found:
    """A registered schema matched the document.

    ``key`` is the schema actually used: the directory-level key when that
    tier matched, otherwise the filename-level key.
    """

    key: str
    schema: CompiledSchema
    directory_level: bool = False


@dataclass(frozen=True, slots=True)
class NotFound:
    """Neither tier matched."""

    directory_key: str
    filename_key: str


Resolution = Union[Found, NotFound]
