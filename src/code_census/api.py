"""Public API for Code Census.

Example:
    >>> from code_census import analyze
    >>>
    >>> stats = analyze("/path/to/code")
    >>> stats.total_files
    142
    >>>
    >>> # With the per-extension file listing
    >>> stats = analyze("/path/to/code", verbose=True)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from .analysis.engine import AnalysisEngine
from .analysis.models import CodeStatistics
from .config import AnalysisConfig, load_config
from .exceptions import InvalidPathError
from .logging_config import get_logger
from .scanning.scanner import FileScanner
from .scanning.structure import scan_project_structure

logger = get_logger(__name__)


def resolve_root(path: Union[str, Path]) -> Path:
    """Resolve and validate the directory to analyze.

    Raises:
        InvalidPathError: If the path is missing, not a directory or unreadable
    """
    root = Path(path).resolve()
    if not root.exists():
        raise InvalidPathError(root, "Directory not found")
    if not root.is_dir():
        raise InvalidPathError(root, "Not a directory")
    if not os.access(root, os.R_OK | os.X_OK):
        raise InvalidPathError(root, "Directory is not readable")
    return root


def run_analysis(path: Union[str, Path], config: AnalysisConfig) -> CodeStatistics:
    """Run the full pipeline with an already-loaded configuration."""
    root = resolve_root(path)
    logger.info(f"Starting analysis of {root}")

    structure = scan_project_structure(root, follow_symlinks=config.follow_symlinks)

    scanner = FileScanner(
        root,
        workers=config.effective_workers,
        follow_symlinks=config.follow_symlinks,
    )
    records = scanner.scan()

    engine = AnalysisEngine(include_file_details=config.include_file_details)
    stats = engine.run(records, structure)

    logger.info(
        f"Analysis complete: {stats.total_files} files, "
        f"{stats.project_structure.directory_count} directories"
    )
    return stats


def analyze(
    path: Union[str, Path] = ".",
    verbose: bool = False,
    config_file: Optional[Path] = None,
    **overrides,
) -> CodeStatistics:
    """Analyze a directory tree and return its statistics report.

    Args:
        path: Root directory to analyze (default: current directory)
        verbose: Include the per-extension detailed file listing
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., workers=4)

    Returns:
        The immutable CodeStatistics report

    Raises:
        InvalidPathError: If ``path`` is not a readable directory
        ConfigurationError: If configuration is invalid
    """
    if verbose:
        overrides["include_file_details"] = True
    config = load_config(config_file=config_file, **overrides)
    return run_analysis(path, config)
