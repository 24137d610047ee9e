"""Configuration loading and management for Code Census.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.code-census.toml)
    3. Project config (./code-census.toml)
    4. Explicit config file
    5. Environment variables (CODE_CENSUS_* prefix)
    6. CLI overrides (passed as kwargs)

The detection heuristics themselves (sample size, zero-byte threshold,
indentation unit, insight thresholds) are constants in their modules and
are not part of this configuration.

Example:
    >>> config = load_config(debug=True, workers=4)
    >>> config.verbosity
    'verbose'
    >>> config.effective_workers
    4
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "CODE_CENSUS_"
CONFIG_FILE_NAME = "code-census.toml"

# Cap on auto-detected workers; per-file work is I/O bound
_MAX_DEFAULT_WORKERS = 8


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        workers: Number of worker threads (None = auto-detect)
        include_file_details: Emit the per-extension detailed file listing
        follow_symlinks: Descend into symlinked directories while walking
        output_file: Path the CLI writes the JSON report to
        verbosity: Logging verbosity level
        log_file: Optional plain-text log file
    """

    workers: Optional[int] = None
    include_file_details: bool = False
    follow_symlinks: bool = False
    output_file: str = "code_analysis_results.json"
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError(f"verbosity must be quiet, normal or verbose, got {self.verbosity!r}")
        if not self.output_file:
            raise ValueError("output_file must not be empty")

    @property
    def effective_workers(self) -> int:
        """Worker count after auto-detection."""
        if self.workers is not None:
            return self.workers
        return min(os.cpu_count() or 4, _MAX_DEFAULT_WORKERS)


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``debug``
            and ``quiet`` are accepted as shorthands for ``verbosity``;
            ``None`` values are ignored.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing, or a
            value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILE_NAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILE_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides.pop("debug", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update(overrides)

    try:
        return AnalysisConfig(**merged)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CODE_CENSUS_* environment variables.

    Supported environment variables:
        CODE_CENSUS_WORKERS: int
        CODE_CENSUS_INCLUDE_FILE_DETAILS: bool (true/false/1/0)
        CODE_CENSUS_FOLLOW_SYMLINKS: bool
        CODE_CENSUS_OUTPUT_FILE: str
        CODE_CENSUS_VERBOSITY: quiet/normal/verbose
        CODE_CENSUS_LOG_FILE: str
    """
    type_hints = get_type_hints(AnalysisConfig)
    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If TOML support is missing or parsing fails
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
