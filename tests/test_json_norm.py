"""Tests for schema_conformance.utils.json_norm."""

from __future__ import annotations

import io
import json
from dataclasses import dataclass
from pathlib import Path

from schema_conformance.model import FailureKind, Stage
from schema_conformance.model.outcome import FileOutcome
from schema_conformance.utils.json_norm import stable_json_dump, stable_json_dumps


@dataclass
class _Point:
    x: int
    where: Path


def test_keys_sorted_and_trailing_newline() -> None:
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    assert s.index('"a"') < s.index('"b"')


def test_paths_enums_and_dataclasses() -> None:
    out = json.loads(
        stable_json_dumps(
            {"kind": FailureKind.RESOLUTION, "p": Path("a/b.json"), "pt": _Point(1, Path("x"))}
        )
    )
    assert out == {"kind": "resolution", "p": "a/b.json", "pt": {"x": 1, "where": "x"}}


def test_objects_with_to_dict() -> None:
    outcome = FileOutcome(
        path=Path("/t/w.json"),
        relative_path="w.json",
        stage=Stage.JUDGED,
        passed=True,
        schema_key="w.schema.json",
        message="Pass: /t/w.json",
    )
    out = json.loads(stable_json_dumps([outcome]))
    assert out[0]["relative_path"] == "w.json"
    assert out[0]["stage"] == "judged"


def test_identical_input_identical_bytes() -> None:
    data = {"z": [3, 2, 1], "a": {"y": None, "b": True}}
    assert stable_json_dumps(data) == stable_json_dumps(dict(reversed(list(data.items()))))


def test_dump_writes_to_stream() -> None:
    buf = io.StringIO()
    stable_json_dump({"ok": True}, buf, indent=None)
    assert buf.getvalue() == '{"ok": true}\n'
