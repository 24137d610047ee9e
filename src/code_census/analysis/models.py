"""Report models: the immutable CodeStatistics tree and its sub-structures.

Serialization uses the report's public field names (PascalCase) in
declaration order. Bookkeeping fields that only exist to attribute the
global maxima are not serialized.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..scanning.classifier import FileCategory


@dataclass(frozen=True)
class ProjectStructureInfo:
    """Directory-level facts computed independently of file records."""

    directory_count: int = 0
    max_depth: int = 0
    files_per_directory: Dict[str, int] = field(default_factory=dict)
    largest_directories: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "DirectoryCount": self.directory_count,
            "MaxDepth": self.max_depth,
            "FilesPerDirectory": dict(self.files_per_directory),
            "LargestDirectories": list(self.largest_directories),
        }


@dataclass(frozen=True)
class DistributionStatistics:
    file_type_distribution: Dict[FileCategory, float] = field(default_factory=dict)
    extension_distribution: Dict[str, float] = field(default_factory=dict)
    average_files_per_directory: float = 0.0
    code_to_resource_ratio: float = 0.0
    documentation_ratio: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "FileTypeDistribution": {
                category.value: pct for category, pct in self.file_type_distribution.items()
            },
            "ExtensionDistribution": dict(self.extension_distribution),
            "AverageFilesPerDirectory": self.average_files_per_directory,
            "CodeToResourceRatio": self.code_to_resource_ratio,
            "DocumentationRatio": self.documentation_ratio,
        }


@dataclass(frozen=True)
class CodeComplexityStats:
    average_file_complexity: float = 0.0
    complexity_by_extension: Dict[str, float] = field(default_factory=dict)
    high_complexity_files: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "AverageFileComplexity": self.average_file_complexity,
            "ComplexityByExtension": dict(self.complexity_by_extension),
            "HighComplexityFiles": list(self.high_complexity_files),
        }


@dataclass(frozen=True)
class CodebaseInsights:
    """Rule-derived findings, recommendations and summary metrics."""

    key_findings: Tuple[str, ...] = ()
    recommendations: Dict[str, str] = field(default_factory=dict)
    metrics: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "KeyFindings": list(self.key_findings),
            "Recommendations": dict(self.recommendations),
            "Metrics": dict(self.metrics),
        }


@dataclass(frozen=True)
class DetailedFileInfo:
    relative_path: str
    lines: int
    characters: int
    max_line_length: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "RelativePath": self.relative_path,
            "Lines": self.lines,
            "Characters": self.characters,
            "MaxLineLength": self.max_line_length,
        }


@dataclass(frozen=True)
class ExtensionFileGroup:
    extension: str
    files: List[DetailedFileInfo] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Extension": self.extension,
            "Files": [f.to_dict() for f in self.files],
        }


@dataclass(frozen=True)
class CodeStatistics:
    """The final analysis report.

    Every ``*_by_extension`` mapping iterates in descending value order.
    ``detailed_files_by_extension`` is None unless verbose mode was
    requested, and is then omitted from serialized output.
    """

    total_files: int = 0
    total_text_files: int = 0
    files_by_extension: Dict[str, int] = field(default_factory=dict)
    total_lines: int = 0
    lines_by_extension: Dict[str, int] = field(default_factory=dict)
    total_blank_lines: int = 0
    total_non_blank_lines: int = 0
    total_characters: int = 0
    average_characters_per_file: float = 0.0
    average_characters_per_file_by_extension: Dict[str, float] = field(default_factory=dict)
    average_lines_per_file: float = 0.0
    average_lines_per_file_by_extension: Dict[str, float] = field(default_factory=dict)
    max_characters_per_file: int = 0
    max_characters_per_file_by_extension: Dict[str, int] = field(default_factory=dict)
    max_lines_per_file: int = 0
    max_lines_per_file_by_extension: Dict[str, int] = field(default_factory=dict)
    average_characters_per_line: float = 0.0
    average_characters_per_line_by_extension: Dict[str, float] = field(default_factory=dict)
    max_characters_per_line: int = 0
    max_characters_per_line_by_extension: Dict[str, int] = field(default_factory=dict)

    project_structure: ProjectStructureInfo = field(default_factory=ProjectStructureInfo)
    distribution: DistributionStatistics = field(default_factory=DistributionStatistics)
    complexity: CodeComplexityStats = field(default_factory=CodeComplexityStats)
    insights: CodebaseInsights = field(default_factory=CodebaseInsights)

    # Not serialized
    file_with_most_characters: Optional[str] = None
    file_with_most_lines: Optional[str] = None

    detailed_files_by_extension: Optional[List[ExtensionFileGroup]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "TotalFiles": self.total_files,
            "TotalTextFiles": self.total_text_files,
            "FilesByExtension": dict(self.files_by_extension),
            "TotalLines": self.total_lines,
            "LinesByExtension": dict(self.lines_by_extension),
            "TotalBlankLines": self.total_blank_lines,
            "TotalNonBlankLines": self.total_non_blank_lines,
            "TotalCharacters": self.total_characters,
            "AverageCharactersPerFile": self.average_characters_per_file,
            "AverageCharactersPerFileByExtension": dict(
                self.average_characters_per_file_by_extension
            ),
            "AverageLinesPerFile": self.average_lines_per_file,
            "AverageLinesPerFileByExtension": dict(self.average_lines_per_file_by_extension),
            "MaxCharactersPerFile": self.max_characters_per_file,
            "MaxCharactersPerFileByExtension": dict(self.max_characters_per_file_by_extension),
            "MaxLinesPerFile": self.max_lines_per_file,
            "MaxLinesPerFileByExtension": dict(self.max_lines_per_file_by_extension),
            "AverageCharactersPerLine": self.average_characters_per_line,
            "AverageCharactersPerLineByExtension": dict(
                self.average_characters_per_line_by_extension
            ),
            "MaxCharactersPerLine": self.max_characters_per_line,
            "MaxCharactersPerLineByExtension": dict(self.max_characters_per_line_by_extension),
            "ProjectStructure": self.project_structure.to_dict(),
            "Distribution": self.distribution.to_dict(),
            "Complexity": self.complexity.to_dict(),
            "Insights": self.insights.to_dict(),
        }
        if self.detailed_files_by_extension is not None:
            data["DetailedFilesByExtension"] = [
                group.to_dict() for group in self.detailed_files_by_extension
            ]
        return data
