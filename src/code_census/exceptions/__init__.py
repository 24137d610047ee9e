"""Exception hierarchy for Code Census."""

from .analysis import AnalysisError, FileAccessError
from .base import CodeCensusError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "CodeCensusError",
    "AnalysisError",
    "FileAccessError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
