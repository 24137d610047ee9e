"""File discovery, classification and per-file metric extraction."""

from .classifier import FileCategory, categorize, file_extension
from .models import FileRecord, MetricName
from .scanner import FileScanner

__all__ = [
    "FileCategory",
    "FileRecord",
    "FileScanner",
    "MetricName",
    "categorize",
    "file_extension",
]
