"""Per-file metric extraction.

Turns one filter-passed file into a FileRecord: line and character
counts, an indentation heuristic, a branch-keyword heuristic and the
derived complexity score. Complexity here is a line-pattern heuristic,
not a parse: it over- and under-counts depending on formatting style.
"""

import re
from pathlib import Path
from typing import Optional

from ..exceptions import FileAccessError
from ..logging_config import get_logger
from .classifier import NO_EXTENSION, categorize, file_extension
from .models import FileRecord, MetricName
from .text_detector import BOM_UTF16_BE, BOM_UTF16_LE, is_text_sample, read_sample

logger = get_logger(__name__)

INDENT_WIDTH = 4
INDENTATION_WEIGHT = 0.3
BRANCHING_WEIGHT = 0.7

BRANCHING_KEYWORDS = ("if", "else", "switch", "case", "for", "foreach", "while", "do")
_BRANCH_PREFIXES = tuple(f"{kw} " for kw in BRANCHING_KEYWORDS)

# Files of these types with at most one line are minified or empty
SINGLE_LINE_SKIP_EXTENSIONS = frozenset({".js", ".css"})

MIGRATION_SOURCE_EXTENSION = ".cs"
_MIGRATION_NAME = re.compile(r"^\d{14}_[a-z0-9_]+\.cs$", re.IGNORECASE)
_GENERATED_NAME_MARKERS = (".designer.", ".generated.")
_GENERATED_NAME_SUFFIXES = (".g.cs", ".g.i.cs")

GENERATED_PATH_MARKERS = (".generated.", ".g.", ".designer.")
GENERATED_HEADER_MARKER = "auto-generated"
GENERATED_HEADER_LINES = 5

TEST_PATH_MARKERS = ("test", "spec")

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


# ── Reading ────────────────────────────────────────────────────


def decode_text(data: bytes) -> str:
    """Decode file bytes, honoring a UTF-16 byte-order mark; UTF-8 otherwise."""
    if data.startswith((BOM_UTF16_LE, BOM_UTF16_BE)):
        return data.decode("utf-16", errors="replace")
    return data.decode("utf-8-sig", errors="replace")


def split_lines(text: str) -> list[str]:
    """Split on \\r\\n, \\r or \\n. A trailing line break does not start a new line."""
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines(filepath: Path) -> list[str]:
    try:
        data = filepath.read_bytes()
    except OSError as e:
        raise FileAccessError(filepath, f"Cannot read file: {e}")
    return split_lines(decode_text(data))


# ── Skip rules ─────────────────────────────────────────────────


def should_skip_content(name: str, extension: str, lines: list[str]) -> bool:
    """Extension-specific drops applied after reading.

    Single-line script/style files are treated as minified; C# migration
    and designer/generated sources are treated as tool output.
    """
    if extension in SINGLE_LINE_SKIP_EXTENSIONS and len(lines) <= 1:
        return True
    if extension == MIGRATION_SOURCE_EXTENSION:
        lowered = name.lower()
        if _MIGRATION_NAME.match(lowered):
            return True
        if any(marker in lowered for marker in _GENERATED_NAME_MARKERS):
            return True
        if lowered.endswith(_GENERATED_NAME_SUFFIXES):
            return True
    return False


# ── Heuristics ─────────────────────────────────────────────────


def is_blank(line: str) -> bool:
    return not line.strip()


def indentation_levels(lines: list[str]) -> int:
    """Deepest leading-whitespace run over non-blank lines, in 4-column units."""
    depths = [
        (len(line) - len(line.lstrip())) // INDENT_WIDTH for line in lines if not is_blank(line)
    ]
    return max(depths, default=0)


def branching_depth(lines: list[str]) -> int:
    """Number of lines that open with a branch keyword followed by a space."""
    return sum(1 for line in lines if line.lstrip().startswith(_BRANCH_PREFIXES))


def complexity_score(indentation: int, branching: int) -> float:
    return indentation * INDENTATION_WEIGHT + branching * BRANCHING_WEIGHT


def is_test_path(path: str) -> bool:
    lowered = path.lower()
    return any(marker in lowered for marker in TEST_PATH_MARKERS)


def is_generated(path: str, lines: list[str]) -> bool:
    """Markers are matched anywhere in the absolute path, ancestors included."""
    lowered = path.lower()
    if any(marker in lowered for marker in GENERATED_PATH_MARKERS):
        return True
    return any(
        GENERATED_HEADER_MARKER in line.lower() for line in lines[:GENERATED_HEADER_LINES]
    )


def _complexity_fields(path: str, lines: list[str], non_blank: int) -> dict:
    indentation = indentation_levels(lines)
    branching = branching_depth(lines)
    return {
        "indentation_levels": indentation,
        "branching_depth": branching,
        "complexity": complexity_score(indentation, branching),
        "is_test": is_test_path(path),
        "is_generated": is_generated(path, lines),
        "metrics": {
            MetricName.CYCLOMATIC_COMPLEXITY: float(branching),
            MetricName.STRUCTURAL_COMPLEXITY: float(indentation),
            MetricName.LINES_OF_CODE: float(non_blank),
        },
    }


# ── Record construction ────────────────────────────────────────


def extract_record(filepath: Path, root_dir: Path) -> Optional[FileRecord]:
    """Build the FileRecord for one filter-passed file.

    Returns None for binary content, for files whose lines are all
    blank, and for files dropped by the extension-specific skip rules.
    An empty (zero-line) file is kept. A failure in the complexity stage
    keeps the record with zeroed complexity fields.

    Raises:
        FileAccessError: If the file cannot be read
    """
    try:
        sample = read_sample(filepath)
    except OSError as e:
        raise FileAccessError(filepath, f"Cannot read file: {e}")
    if not is_text_sample(sample):
        logger.debug(f"Skipped (binary): {filepath}")
        return None

    lines = read_lines(filepath)
    extension = file_extension(filepath.name)
    if should_skip_content(filepath.name, extension, lines):
        logger.debug(f"Skipped (content rule): {filepath}")
        return None

    relative_path = str(filepath.relative_to(root_dir))
    lengths = [len(line) for line in lines]
    non_blank_lengths = [n for line, n in zip(lines, lengths) if not is_blank(line)]
    non_blank = len(non_blank_lengths)
    if lines and not non_blank:
        logger.debug(f"Skipped (only blank lines): {filepath}")
        return None

    try:
        complexity = _complexity_fields(str(filepath), lines, non_blank)
    except Exception as e:
        logger.warning(f"Complexity metrics failed for {filepath}: {e}")
        complexity = {}

    return FileRecord(
        path=filepath,
        relative_path=relative_path,
        extension=extension or NO_EXTENSION,
        category=categorize(extension),
        total_lines=len(lines),
        blank_lines=len(lines) - non_blank,
        non_blank_lines=non_blank,
        total_characters=sum(lengths),
        max_line_length=max(lengths, default=0),
        characters_per_line=sum(non_blank_lengths) / non_blank if non_blank else 0.0,
        **complexity,
    )
