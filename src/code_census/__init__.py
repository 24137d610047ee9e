"""
Code Census - Codebase size and complexity statistics

Walks a directory tree, classifies and filters its files, measures each
text file, and aggregates the measurements into a distribution,
complexity and insight report.
"""

__version__ = "0.1.0"

from .analysis.models import CodeStatistics
from .api import analyze
from .scanning.classifier import FileCategory
from .scanning.models import FileRecord

__all__ = [
    "analyze",
    "CodeStatistics",
    "FileCategory",
    "FileRecord",
]
