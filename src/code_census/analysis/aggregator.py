"""Fold per-file records into whole-project totals.

Every per-extension mapping is built by grouping records in the order
they arrive (path order, see FileScanner) and then sorted descending by
value with a stable sort, so ties keep grouping order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TypeVar

import numpy as np

from ..scanning.models import FileRecord
from .models import (
    CodeStatistics,
    DetailedFileInfo,
    ExtensionFileGroup,
    ProjectStructureInfo,
)

V = TypeVar("V", int, float)


def group_by_extension(records: Iterable[FileRecord]) -> dict[str, list[FileRecord]]:
    """Group records by extension, keys in first-encounter order."""
    groups: dict[str, list[FileRecord]] = {}
    for record in records:
        groups.setdefault(record.extension, []).append(record)
    return groups


def sort_descending(mapping: Mapping[str, V]) -> dict[str, V]:
    return dict(sorted(mapping.items(), key=lambda item: item[1], reverse=True))


def _mean(values: Sequence[float]) -> float:
    return float(np.mean(values)) if len(values) else 0.0


def _per_extension(
    groups: Mapping[str, list[FileRecord]],
    reduce: Callable[[list[FileRecord]], V],
) -> dict[str, V]:
    return sort_descending({ext: reduce(group) for ext, group in groups.items()})


def build_detailed_listing(
    groups: Mapping[str, list[FileRecord]],
) -> list[ExtensionFileGroup]:
    """Per-extension file detail, longest lines first, then most lines, then most characters."""
    listing = []
    for extension, group in groups.items():
        files = [
            DetailedFileInfo(
                relative_path=r.relative_path,
                lines=r.total_lines,
                characters=r.total_characters,
                max_line_length=r.max_line_length,
            )
            for r in group
        ]
        files.sort(key=lambda f: (-f.max_line_length, -f.lines, -f.characters))
        listing.append(ExtensionFileGroup(extension=extension, files=files))
    return listing


def aggregate(
    records: Sequence[FileRecord],
    structure: ProjectStructureInfo,
    include_file_details: bool = False,
) -> CodeStatistics:
    """Compute totals, per-extension maps and attributed maxima.

    An empty record set yields a report with zero/empty aggregates (and an
    empty detailed listing in verbose mode); only ``structure`` is filled.
    """
    if not records:
        return CodeStatistics(
            project_structure=structure,
            detailed_files_by_extension=[] if include_file_details else None,
        )

    groups = group_by_extension(records)

    total_characters = sum(r.total_characters for r in records)
    total_non_blank = sum(r.non_blank_lines for r in records)
    most_characters = max(records, key=lambda r: r.total_characters)
    most_lines = max(records, key=lambda r: r.total_lines)

    return CodeStatistics(
        total_files=len(records),
        total_text_files=len(records),
        files_by_extension=_per_extension(groups, len),
        total_lines=sum(r.total_lines for r in records),
        lines_by_extension=_per_extension(groups, lambda g: sum(r.total_lines for r in g)),
        total_blank_lines=sum(r.blank_lines for r in records),
        total_non_blank_lines=total_non_blank,
        total_characters=total_characters,
        average_characters_per_file=_mean([r.total_characters for r in records]),
        average_characters_per_file_by_extension=_per_extension(
            groups, lambda g: _mean([r.total_characters for r in g])
        ),
        average_lines_per_file=_mean([r.total_lines for r in records]),
        average_lines_per_file_by_extension=_per_extension(
            groups, lambda g: _mean([r.total_lines for r in g])
        ),
        max_characters_per_file=most_characters.total_characters,
        max_characters_per_file_by_extension=_per_extension(
            groups, lambda g: max(r.total_characters for r in g)
        ),
        max_lines_per_file=most_lines.total_lines,
        max_lines_per_file_by_extension=_per_extension(
            groups, lambda g: max(r.total_lines for r in g)
        ),
        average_characters_per_line=(
            total_characters / total_non_blank if total_non_blank > 0 else 0.0
        ),
        average_characters_per_line_by_extension=_per_extension(
            groups, lambda g: _mean([r.characters_per_line for r in g])
        ),
        max_characters_per_line=max(r.max_line_length for r in records),
        max_characters_per_line_by_extension=_per_extension(
            groups, lambda g: max(r.max_line_length for r in g)
        ),
        project_structure=structure,
        file_with_most_characters=str(most_characters.path),
        file_with_most_lines=str(most_lines.path),
        detailed_files_by_extension=(
            build_detailed_listing(groups) if include_file_details else None
        ),
    )
