"""Sequential aggregation pipeline over a fully materialized record list."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from ..logging_config import get_logger
from ..scanning.models import FileRecord
from .aggregator import aggregate
from .complexity import compute_complexity
from .distribution import compute_distribution
from .insights import generate_insights
from .models import CodeStatistics, ProjectStructureInfo

logger = get_logger(__name__)


class AnalysisEngine:
    """Folds records through Aggregator → Distribution → Complexity → Insights.

    Each stage reads the report built so far; none of them mutate records.
    """

    def __init__(self, include_file_details: bool = False) -> None:
        self.include_file_details = include_file_details

    def run(
        self, records: Sequence[FileRecord], structure: ProjectStructureInfo
    ) -> CodeStatistics:
        stats = aggregate(records, structure, self.include_file_details)
        stats = replace(stats, distribution=compute_distribution(records, structure))
        stats = replace(stats, complexity=compute_complexity(records))
        stats = replace(stats, insights=generate_insights(records, stats))
        logger.debug(
            f"Aggregated {stats.total_files} files into "
            f"{len(stats.files_by_extension)} extensions"
        )
        return stats
