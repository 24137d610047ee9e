"""Rule-based codebase insights.

Each rule compares one aggregate against a fixed threshold and may add
a finding, a recommendation or nothing. Findings keep rule order.
"""

from collections.abc import Sequence

from ..scanning.models import FileRecord
from .models import CodebaseInsights, CodeStatistics

HIGH_COMPLEXITY_MEAN = 5
LOW_DOCUMENTATION_PERCENT = 10
HIGH_GENERATED_FRACTION = 0.3
HIGH_CODE_TO_RESOURCE_RATIO = 3
DEEP_STRUCTURE_DEPTH = 7


def generate_insights(records: Sequence[FileRecord], stats: CodeStatistics) -> CodebaseInsights:
    if not records:
        return CodebaseInsights()

    total = len(records)
    generated = sum(1 for r in records if r.is_generated)
    tests = sum(1 for r in records if r.is_test)

    findings: list[str] = []
    if stats.complexity.average_file_complexity > HIGH_COMPLEXITY_MEAN:
        findings.append("High average code complexity detected")
    if stats.distribution.documentation_ratio < LOW_DOCUMENTATION_PERCENT:
        findings.append("Low documentation coverage")
    if generated > total * HIGH_GENERATED_FRACTION:
        findings.append(f"High proportion of generated code ({generated} files)")

    recommendations: dict[str, str] = {}
    if stats.complexity.high_complexity_files:
        recommendations["Complexity"] = "Consider refactoring high complexity files"
    if stats.distribution.code_to_resource_ratio > HIGH_CODE_TO_RESOURCE_RATIO:
        recommendations["Resources"] = (
            "Consider organizing resources into a dedicated directory"
        )
    if stats.project_structure.max_depth > DEEP_STRUCTURE_DEPTH:
        recommendations["Structure"] = (
            "Deep directory structure detected. Consider flattening the hierarchy"
        )

    # MaintainabilityIndex is not clamped and goes negative past a mean of 10
    metrics = {
        "MaintainabilityIndex": 100 - stats.complexity.average_file_complexity * 10,
        "TestCoverage": tests / total * 100,
        "GeneratedCodeRatio": generated / total * 100,
    }

    return CodebaseInsights(
        key_findings=tuple(findings),
        recommendations=recommendations,
        metrics=metrics,
    )
