"""File discovery — walk a schema or document tree in a stable order."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterator

from schema_conformance.core.config import ConformanceConfig

_logger = logging.getLogger(__name__)

WalkWarning = Callable[[Path, OSError], None]


def require_root(root: Path) -> Path:
    """Return *root* resolved, or raise if it cannot be walked.

    This is the only fatal condition of a run.
    """
    if not root.exists():
        raise FileNotFoundError(f"root directory does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"root is not a directory: {root}")
    if not os.access(root, os.R_OK | os.X_OK):
        raise PermissionError(f"root directory is not readable: {root}")
    return root.resolve()


def iter_files(
    root: Path,
    cfg: ConformanceConfig | None = None,
    *,
    on_warning: WalkWarning | None = None,
) -> Iterator[Path]:
    """Yield every regular file under *root*, depth-first, sorted by name.

    Unreadable subdirectories are reported through *on_warning* (or the
    module logger) and skipped; the root itself is checked up front by
    :func:`require_root`.
    """
    cfg = cfg or ConformanceConfig()
    root = require_root(root)

    def _onerror(exc: OSError) -> None:
        bad = Path(exc.filename) if exc.filename else root
        if bad == root:
            raise exc
        if on_warning is not None:
            on_warning(bad, exc)
        else:
            _logger.warning("skipping unreadable directory %s: %s", bad, exc)

    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_onerror, followlinks=cfg.follow_symlinks
    ):
        dirnames.sort()
        for name in sorted(filenames):
            p = Path(dirpath) / name
            if p.is_symlink() and not cfg.follow_symlinks:
                continue
            if not p.is_file():
                continue
            yield p


def relative_key(path: Path, root: Path) -> str:
    """POSIX path of *path* relative to *root*; the registry key form."""
    return path.relative_to(root).as_posix()


def iter_schema_files(
    root: Path,
    cfg: ConformanceConfig | None = None,
    *,
    on_warning: WalkWarning | None = None,
) -> Iterator[Path]:
    """Yield files under *root* whose name ends with the schema suffix."""
    cfg = cfg or ConformanceConfig()
    for p in iter_files(root, cfg, on_warning=on_warning):
        if p.name.endswith(cfg.schema_suffix):
            yield p


def iter_documents(
    root: Path,
    cfg: ConformanceConfig | None = None,
    *,
    on_warning: WalkWarning | None = None,
) -> Iterator[Path]:
    """Yield candidate documents under *root*, skipping editor backups."""
    cfg = cfg or ConformanceConfig()
    for p in iter_files(root, cfg, on_warning=on_warning):
        if cfg.backup_marker and p.name.endswith(cfg.backup_marker):
            continue
        yield p
