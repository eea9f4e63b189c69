"""Shared fixtures: build schema and document trees under ``tmp_path``."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest


WIDGET_SCHEMA = {"type": "object", "required": ["id"]}


def _write(path: Path, obj: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(obj, str):
        path.write_text(obj, encoding="utf-8")
    else:
        path.write_text(json.dumps(obj), encoding="utf-8")
    return path


@pytest.fixture
def write_json() -> Callable[[Path, Any], Path]:
    """Write *obj* as JSON (or a raw string verbatim) to *path*."""
    return _write


@pytest.fixture
def schema_dir(tmp_path: Path) -> Path:
    d = tmp_path / "schemas"
    d.mkdir()
    return d


@pytest.fixture
def examples_dir(tmp_path: Path) -> Path:
    d = tmp_path / "examples"
    d.mkdir()
    return d


@pytest.fixture
def invalid_dir(tmp_path: Path) -> Path:
    d = tmp_path / "invalid"
    d.mkdir()
    return d


@pytest.fixture
def widget_schema(schema_dir: Path) -> Path:
    return _write(schema_dir / "widget.schema.json", WIDGET_SCHEMA)
