"""Filtered directory walk shared by file discovery and structure scanning."""

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

from ..logging_config import get_logger
from .classifier import is_excluded_directory, is_excluded_file

logger = get_logger(__name__)


def _directory_key(path: str) -> tuple[int, int]:
    st = os.stat(path)
    return st.st_dev, st.st_ino


def _first_visit(path: str, visited: set) -> bool:
    """Record a directory reached through a followed link; False if seen before."""
    try:
        key = _directory_key(path)
    except OSError as e:
        logger.warning(f"Cannot stat directory {path}: {e.strerror}")
        return False
    if key in visited:
        logger.debug(f"Skipped (already visited): {path}")
        return False
    visited.add(key)
    return True


def walk_tree(root: Path, follow_symlinks: bool = False) -> Iterator[tuple[Path, list[str]]]:
    """Yield ``(directory, file_names)`` for every non-excluded directory.

    Excluded directories are pruned, so nothing beneath them is visited.
    Directory and file names are sorted for a stable visiting order; the
    root comes first. When symlinks are followed, each physical directory
    is visited once, so link cycles terminate.
    """

    def _on_error(err: OSError) -> None:
        logger.warning(f"Cannot list directory {err.filename}: {err.strerror}")

    visited: Optional[set] = {_directory_key(str(root))} if follow_symlinks else None

    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_on_error, followlinks=follow_symlinks
    ):
        kept = sorted(d for d in dirnames if not is_excluded_directory(d))
        if visited is not None:
            kept = [d for d in kept if _first_visit(os.path.join(dirpath, d), visited)]
        dirnames[:] = kept
        yield Path(dirpath), sorted(filenames)


def discover_files(root: Path, follow_symlinks: bool = False) -> list[Path]:
    """All files under ``root`` that pass the directory and extension filters."""
    files: list[Path] = []
    skipped = 0
    for directory, filenames in walk_tree(root, follow_symlinks=follow_symlinks):
        for name in filenames:
            if is_excluded_file(name):
                skipped += 1
                continue
            files.append(directory / name)
    logger.debug(f"Discovered {len(files)} candidate files ({skipped} excluded by extension)")
    return files
