"""CLI tests: exit codes, JSON output and a subprocess smoke run."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from schema_conformance.__main__ import main
from schema_conformance.utils.exit_codes import ExitCode

REPO_ROOT = Path(__file__).resolve().parents[1]


class TestExitCodes:
    def test_conformant_examples_exit_0(
        self, widget_schema, schema_dir, examples_dir, write_json
    ) -> None:
        write_json(examples_dir / "widget.json", {"id": 1})
        rc = main(["examples", "--schemas", str(schema_dir), "--examples", str(examples_dir)])
        assert rc == ExitCode.SUCCESS

    def test_violation_exit_1(self, widget_schema, schema_dir, invalid_dir, write_json) -> None:
        write_json(invalid_dir / "widget.json", {"id": 1})
        rc = main(["invalid", "--schemas", str(schema_dir), "--invalid", str(invalid_dir)])
        assert rc == ExitCode.VIOLATION

    def test_missing_root_exit_2(self, schema_dir, tmp_path: Path, capsys) -> None:
        rc = main(
            ["examples", "--schemas", str(schema_dir), "--examples", str(tmp_path / "gone")]
        )
        assert rc == ExitCode.ERROR
        assert "does not exist" in capsys.readouterr().err

    def test_no_subcommand_exit_2(self) -> None:
        assert main([]) == ExitCode.ERROR

    def test_all_without_targets_exit_2(self, schema_dir) -> None:
        assert main(["all", "--schemas", str(schema_dir)]) == ExitCode.ERROR

    def test_bad_draft_in_environment_exit_2(self, schema_dir, examples_dir, monkeypatch) -> None:
        monkeypatch.setenv("SCHEMA_CONFORMANCE_DRAFT", "next")
        rc = main(["examples", "--schemas", str(schema_dir), "--examples", str(examples_dir)])
        assert rc == ExitCode.ERROR

    def test_usage_error_from_argparse(self, examples_dir) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["examples", "--examples", str(examples_dir)])
        assert exc.value.code == 2

    def test_all_fails_if_either_run_fails(
        self, widget_schema, schema_dir, examples_dir, invalid_dir, write_json
    ) -> None:
        write_json(examples_dir / "widget.json", {"id": 1})
        write_json(invalid_dir / "widget.json", {"id": 2})
        rc = main(
            [
                "all",
                "--schemas",
                str(schema_dir),
                "--examples",
                str(examples_dir),
                "--invalid",
                str(invalid_dir),
            ]
        )
        assert rc == ExitCode.VIOLATION


def test_json_report(widget_schema, schema_dir, examples_dir, invalid_dir, write_json, capsys) -> None:
    write_json(examples_dir / "widget.json", {})
    write_json(invalid_dir / "widget.json", {})

    rc = main(
        [
            "all",
            "--schemas",
            str(schema_dir),
            "--examples",
            str(examples_dir),
            "--invalid",
            str(invalid_dir),
            "--json",
        ]
    )
    captured = capsys.readouterr()
    out = json.loads(captured.out)

    assert rc == ExitCode.VIOLATION
    assert out["ok"] is False
    assert [r["mode"] for r in out["runs"]] == ["examples", "invalid"]
    examples_run, invalid_run = out["runs"]
    assert examples_run["ok"] is False
    assert examples_run["diagnostics"][0]["kind"] == "validation_mismatch"
    assert invalid_run["ok"] is True
    assert invalid_run["diagnostics"] == []
    assert "FAIL  examples" in captured.err


def test_subprocess_module_run(widget_schema, schema_dir, examples_dir, write_json) -> None:
    write_json(examples_dir / "widget.json", {})

    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO_ROOT / "src")
    env.pop("SCHEMA_CONFORMANCE_DRAFT", None)
    r = subprocess.run(
        [
            sys.executable,
            "-m",
            "schema_conformance",
            "examples",
            "--schemas",
            str(schema_dir),
            "--examples",
            str(examples_dir),
        ],
        env=env,
        text=True,
        capture_output=True,
    )

    assert r.returncode == 1, (r.stdout, r.stderr)
    assert "Schema: widget.schema.json" in r.stderr
    assert "failed to validate" in r.stderr
    assert r.stdout == ""
