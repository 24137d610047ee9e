"""Complexity statistics and outlier detection."""

from collections.abc import Sequence

import numpy as np

from ..scanning.models import FileRecord
from .aggregator import group_by_extension
from .models import CodeComplexityStats

HIGH_COMPLEXITY_FACTOR = 2
MAX_HIGH_COMPLEXITY_FILES = 10


def compute_complexity(records: Sequence[FileRecord]) -> CodeComplexityStats:
    """Mean complexity overall and per extension, plus the worst outliers.

    A file is an outlier when its score exceeds twice the mean; at most
    ten are listed, highest first, ties in record order.
    """
    if not records:
        return CodeComplexityStats()

    average = float(np.mean([r.complexity for r in records]))
    by_extension = {
        ext: float(np.mean([r.complexity for r in group]))
        for ext, group in group_by_extension(records).items()
    }

    threshold = average * HIGH_COMPLEXITY_FACTOR
    outliers = sorted(
        (r for r in records if r.complexity > threshold),
        key=lambda r: r.complexity,
        reverse=True,
    )

    return CodeComplexityStats(
        average_file_complexity=average,
        complexity_by_extension=by_extension,
        high_complexity_files=[r.relative_path for r in outliers[:MAX_HIGH_COMPLEXITY_FILES]],
    )
