"""Project structure scanning: directory count, depth and file density."""

from pathlib import Path

from ..analysis.models import ProjectStructureInfo
from ..logging_config import get_logger
from .walker import walk_tree

logger = get_logger(__name__)

TOP_DIRECTORIES = 10
LARGEST_DIRECTORIES = 5


def scan_project_structure(root: Path, follow_symlinks: bool = False) -> ProjectStructureInfo:
    """Summarize the filtered directory tree under ``root``.

    The root counts as a directory at depth 0. Per-directory counts
    include every direct file, whatever its extension.
    """
    counts: list[tuple[str, int]] = []
    max_depth = 0

    for directory, filenames in walk_tree(root, follow_symlinks=follow_symlinks):
        relative = directory.relative_to(root)
        max_depth = max(max_depth, len(relative.parts))
        counts.append((str(relative), len(filenames)))

    # sorted() is stable: equal counts keep walk order
    ranked = sorted(counts, key=lambda item: item[1], reverse=True)

    info = ProjectStructureInfo(
        directory_count=len(counts),
        max_depth=max_depth,
        files_per_directory=dict(ranked[:TOP_DIRECTORIES]),
        largest_directories=[name for name, _ in ranked[:LARGEST_DIRECTORIES]],
    )
    logger.debug(f"Structure: {info.directory_count} directories, max depth {info.max_depth}")
    return info
