"""Aggregation and statistics over per-file records."""

from .models import (
    CodebaseInsights,
    CodeComplexityStats,
    CodeStatistics,
    DetailedFileInfo,
    DistributionStatistics,
    ExtensionFileGroup,
    ProjectStructureInfo,
)

__all__ = [
    "CodeStatistics",
    "ProjectStructureInfo",
    "DistributionStatistics",
    "CodeComplexityStats",
    "CodebaseInsights",
    "DetailedFileInfo",
    "ExtensionFileGroup",
]
