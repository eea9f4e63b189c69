"""Schema registry keyed by path relative to the schema root.

Usage::

    from schema_conformance.contracts.registry import SchemaRegistry

    registry = SchemaRegistry()
    registry.add("widget.schema.json", {"type": "object", "required": ["id"]})
    registry.seal()
    ok, errors = registry.get("widget.schema.json").check({"id": 1})

Schemas are compiled only when the registry is sealed, against a
``referencing.Registry`` holding every added schema, so a ``$ref`` to
another registered schema resolves no matter which one the walk reached
first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator
from urllib.parse import quote

import jsonschema
from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for
from referencing import Registry
from referencing.exceptions import Unresolvable
from referencing.jsonschema import (
    DRAFT3,
    DRAFT4,
    DRAFT6,
    DRAFT7,
    DRAFT201909,
    DRAFT202012,
)

from schema_conformance.core.config import ConformanceConfig
from schema_conformance.exceptions import SchemaRegistrationError

_logger = logging.getLogger(__name__)

# ── draft name → (validator class, referencing specification) ───────

_DRAFTS = {
    "3": (jsonschema.Draft3Validator, DRAFT3),
    "4": (jsonschema.Draft4Validator, DRAFT4),
    "6": (jsonschema.Draft6Validator, DRAFT6),
    "7": (jsonschema.Draft7Validator, DRAFT7),
    "2019-09": (jsonschema.Draft201909Validator, DRAFT201909),
    "2020-12": (jsonschema.Draft202012Validator, DRAFT202012),
}

_SPEC_BY_CLASS = {cls: spec for cls, spec in _DRAFTS.values()}


def key_uri(key: str) -> str:
    """URI a schema is registered under; file names may hold `#`, `?` or `%`."""
    return quote(key, safe="/")


def _location(path: Any) -> str:
    return " -> ".join(str(p) for p in path) if path else "root"


def render_error(error: jsonschema.ValidationError) -> dict[str, Any]:
    """Flatten a ``ValidationError`` into a JSON-friendly detail dict."""
    return {
        "location": _location(error.absolute_path),
        "message": error.message,
        "validator": str(error.validator),
        "schema_path": _location(error.absolute_schema_path),
    }


@dataclass(frozen=True, slots=True)
class SchemaEntry:
    """A parsed schema as registered, before compilation."""

    key: str
    schema: Any
    validator_cls: type


@dataclass(frozen=True, slots=True)
class CompiledSchema:
    """A registered schema bound to its validator."""

    key: str
    schema: Any
    validator: Any

    def check(self, document: Any) -> tuple[bool, list[dict[str, Any]]]:
        """Validate *document*; return ``(valid, error_details)``.

        Raises :class:`SchemaRegistrationError` when the engine cannot apply
        the schema, e.g. a ``$ref`` that is unresolvable or loops forever.
        """
        try:
            errors = [render_error(e) for e in self.validator.iter_errors(document)]
        except Unresolvable as exc:
            raise SchemaRegistrationError(
                self.key, f"unresolvable reference: {exc}"
            ) from exc
        except RecursionError as exc:
            raise SchemaRegistrationError(
                self.key, "reference cycle never reaches a keyword"
            ) from exc
        except Exception as exc:
            raise SchemaRegistrationError(
                self.key, f"{type(exc).__name__}: {exc}"
            ) from exc
        return (not errors, errors)


class SchemaRegistry:
    """Mapping of relative schema key to compiled schema.

    Written during the load phase only; :meth:`seal` ends that phase.
    Re-adding a key replaces the earlier entry.
    """

    def __init__(self, config: ConformanceConfig | None = None):
        self.config = config or ConformanceConfig()
        self._default_cls, _ = _DRAFTS[self.config.default_draft]
        self._entries: dict[str, SchemaEntry] = {}
        self._compiled: dict[str, CompiledSchema] = {}
        self._sealed = False

    # ── load phase ──────────────────────────────────────────────────

    def add(self, key: str, schema: Any) -> SchemaEntry:
        """Register *schema* under *key* after checking it is a schema.

        Raises :class:`SchemaRegistrationError` if the engine rejects it.
        """
        if self._sealed:
            raise RuntimeError(f"registry is sealed; cannot add {key}")
        if not isinstance(schema, (dict, bool)):
            raise SchemaRegistrationError(
                key, f"top-level value must be an object or boolean, got {type(schema).__name__}"
            )

        if isinstance(schema, dict) and not isinstance(schema.get("$schema", ""), str):
            raise SchemaRegistrationError(key, "\"$schema\" must be a string")

        cls = validator_for(schema, default=self._default_cls)
        try:
            cls.check_schema(schema)
        except SchemaError as exc:
            raise SchemaRegistrationError(key, exc.message) from exc

        if key in self._entries:
            _logger.debug("re-registering schema %s", key)
        entry = SchemaEntry(key=key, schema=schema, validator_cls=cls)
        self._entries[key] = entry
        return entry

    def seal(self) -> None:
        """Compile every entry against the full set and freeze the registry."""
        if self._sealed:
            return

        resources = []
        for entry in self._entries.values():
            spec = _SPEC_BY_CLASS.get(entry.validator_cls, DRAFT202012)
            resource = spec.create_resource(entry.schema)
            uri = key_uri(entry.key)
            resources.append((uri, resource))
            schema_id = resource.id()  # "$id", or "id" for drafts 3/4
            if schema_id and schema_id.rstrip("#") != uri:
                resources.append((schema_id.rstrip("#"), resource))
        ref_registry: Registry = Registry().with_resources(resources)

        for entry in self._entries.values():
            cls = entry.validator_cls
            # Entering through the key makes relative $refs resolve against it.
            validator = cls(
                {"$ref": key_uri(entry.key)},
                registry=ref_registry,
                format_checker=cls.FORMAT_CHECKER if self.config.check_formats else None,
            )
            self._compiled[entry.key] = CompiledSchema(
                key=entry.key, schema=entry.schema, validator=validator
            )
        self._sealed = True

    # ── check phase ─────────────────────────────────────────────────

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, key: str) -> CompiledSchema | None:
        if not self._sealed:
            raise RuntimeError("registry must be sealed before lookups")
        return self._compiled.get(key)

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
