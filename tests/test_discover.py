"""Tests for schema_conformance.core.discover."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from schema_conformance.core.config import ConformanceConfig
from schema_conformance.core.discover import (
    iter_documents,
    iter_files,
    iter_schema_files,
    relative_key,
    require_root,
)


def _touch(p: Path) -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("{}", encoding="utf-8")
    return p


class TestRequireRoot:
    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="does not exist"):
            require_root(tmp_path / "nope")

    def test_file_root_raises(self, tmp_path: Path) -> None:
        f = _touch(tmp_path / "a.json")
        with pytest.raises(NotADirectoryError):
            require_root(f)

    def test_returns_resolved_dir(self, tmp_path: Path) -> None:
        assert require_root(tmp_path) == tmp_path.resolve()


class TestIterFiles:
    def test_walk_is_sorted_and_recursive(self, tmp_path: Path) -> None:
        _touch(tmp_path / "b.json")
        _touch(tmp_path / "a" / "z.json")
        _touch(tmp_path / "a" / "c" / "y.json")
        _touch(tmp_path / "a.json")

        rels = [relative_key(p, tmp_path.resolve()) for p in iter_files(tmp_path)]

        # top-down: a directory's own files before its subdirectories
        assert rels == ["a.json", "b.json", "a/z.json", "a/c/y.json"]

    def test_symlinked_files_skipped_by_default(self, tmp_path: Path) -> None:
        real = _touch(tmp_path / "real.json")
        os.symlink(real, tmp_path / "link.json")

        names = [p.name for p in iter_files(tmp_path)]
        assert names == ["real.json"]

        followed = [p.name for p in iter_files(tmp_path, ConformanceConfig(follow_symlinks=True))]
        assert followed == ["link.json", "real.json"]

    def test_missing_root_raises_on_iteration(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            list(iter_files(tmp_path / "missing"))


class TestFilters:
    def test_schema_files_need_schema_suffix(self, tmp_path: Path) -> None:
        _touch(tmp_path / "widget.schema.json")
        _touch(tmp_path / "widget.json")
        _touch(tmp_path / "widget.schema.json~")
        _touch(tmp_path / "nested" / "part.schema.json")

        rels = sorted(
            relative_key(p, tmp_path.resolve()) for p in iter_schema_files(tmp_path)
        )
        assert rels == ["nested/part.schema.json", "widget.schema.json"]

    def test_documents_skip_backup_files(self, tmp_path: Path) -> None:
        _touch(tmp_path / "widget.json")
        _touch(tmp_path / "widget.json~")
        _touch(tmp_path / "notes.txt")

        names = sorted(p.name for p in iter_documents(tmp_path))
        assert names == ["notes.txt", "widget.json"]

    def test_custom_backup_marker(self, tmp_path: Path) -> None:
        _touch(tmp_path / "widget.json")
        _touch(tmp_path / "widget.json.bak")

        cfg = ConformanceConfig(backup_marker=".bak")
        names = [p.name for p in iter_documents(tmp_path, cfg)]
        assert names == ["widget.json"]


def test_relative_key_uses_posix_separators(tmp_path: Path) -> None:
    p = tmp_path / "a" / "b" / "c.json"
    assert relative_key(p, tmp_path) == "a/b/c.json"
