"""File-type distribution statistics."""

from collections import Counter
from collections.abc import Sequence

from ..scanning.classifier import FileCategory
from ..scanning.models import FileRecord
from .models import DistributionStatistics, ProjectStructureInfo

RESOURCE_CATEGORIES = frozenset({FileCategory.STYLE, FileCategory.MARKUP, FileCategory.SCRIPT})


def _percentages(counts: Counter, total: int) -> dict:
    return {key: count / total * 100 for key, count in counts.items()}


def compute_distribution(
    records: Sequence[FileRecord], structure: ProjectStructureInfo
) -> DistributionStatistics:
    """Category and extension shares, files per directory, code/resource and doc ratios.

    Percentage maps keep first-encounter order. The code-to-resource ratio
    falls back to the raw source count when there are no resource files.
    """
    total = len(records)
    if total == 0:
        return DistributionStatistics()

    categories = Counter(r.category for r in records)
    extensions = Counter(r.extension for r in records)

    source_files = categories[FileCategory.SOURCE]
    resource_files = sum(categories[c] for c in RESOURCE_CATEGORIES)

    return DistributionStatistics(
        file_type_distribution=_percentages(categories, total),
        extension_distribution=_percentages(extensions, total),
        average_files_per_directory=(
            total / structure.directory_count if structure.directory_count else 0.0
        ),
        code_to_resource_ratio=(
            source_files / resource_files if resource_files > 0 else float(source_files)
        ),
        documentation_ratio=categories[FileCategory.DOCUMENTATION] / total * 100,
    )
