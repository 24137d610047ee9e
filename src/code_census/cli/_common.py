"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    verbose: bool = False,
    output: Optional[Path] = None,
    workers: Optional[int] = None,
    debug: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if verbose:
        overrides["include_file_details"] = True
    if output is not None:
        overrides["output_file"] = str(output)
    if workers is not None:
        overrides["workers"] = workers
    if debug:
        overrides["debug"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
