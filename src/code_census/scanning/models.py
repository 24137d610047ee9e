"""Per-file data models produced by the scanning layer."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict

from .classifier import FileCategory


class MetricName(str, Enum):
    """Closed set of named per-file sub-metrics."""

    CYCLOMATIC_COMPLEXITY = "CyclomaticComplexity"
    STRUCTURAL_COMPLEXITY = "StructuralComplexity"
    LINES_OF_CODE = "LinesOfCode"


@dataclass(frozen=True)
class FileRecord:
    """Metric snapshot for one analyzed file.

    Records are transient working state: they feed the aggregation stages
    and never appear in the serialized report.

    Invariants:
        blank_lines + non_blank_lines == total_lines
        complexity == 0.3 * indentation_levels + 0.7 * branching_depth
    """

    path: Path  # absolute
    relative_path: str
    extension: str
    category: FileCategory = FileCategory.OTHER
    total_lines: int = 0
    blank_lines: int = 0
    non_blank_lines: int = 0
    total_characters: int = 0
    max_line_length: int = 0
    characters_per_line: float = 0.0
    complexity: float = 0.0
    indentation_levels: int = 0
    branching_depth: int = 0
    is_test: bool = False
    is_generated: bool = False
    metrics: Dict[MetricName, float] = field(default_factory=dict)
