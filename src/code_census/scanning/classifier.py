"""File classification and inclusion filters.

Maps file extensions to coarse categories and decides which files and
directories take part in an analysis run. All tables here are static;
nothing mutates them at runtime.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class FileCategory(str, Enum):
    """Coarse semantic grouping of a file."""

    SOURCE = "Source"
    MARKUP = "Markup"
    STYLE = "Style"
    SCRIPT = "Script"
    DATA = "Data"
    CONFIGURATION = "Configuration"
    DOCUMENTATION = "Documentation"
    OTHER = "Other"


@dataclass(frozen=True)
class FileTypeInfo:
    """One row of the extension → category table."""

    category: FileCategory
    extensions: frozenset[str]
    description: str = ""


# Lookup order matters: the first row containing an extension wins.
FILE_TYPES: tuple[FileTypeInfo, ...] = (
    FileTypeInfo(FileCategory.SOURCE, frozenset({".cs"}), "C# source files"),
    FileTypeInfo(
        FileCategory.MARKUP,
        frozenset({".html", ".htm", ".cshtml", ".razor"}),
        "HTML and template files",
    ),
    FileTypeInfo(
        FileCategory.STYLE, frozenset({".css", ".scss", ".sass", ".less"}), "Style sheets"
    ),
    FileTypeInfo(
        FileCategory.SCRIPT,
        frozenset({".js", ".ts", ".jsx", ".tsx"}),
        "JavaScript and TypeScript files",
    ),
    FileTypeInfo(FileCategory.DATA, frozenset({".json", ".xml", ".yaml", ".yml"}), "Data files"),
    FileTypeInfo(
        FileCategory.CONFIGURATION,
        frozenset({".config", ".conf", ".ini", ".env"}),
        "Configuration files",
    ),
    FileTypeInfo(
        FileCategory.DOCUMENTATION, frozenset({".md", ".txt", ".rst"}), "Documentation files"
    ),
)

# Compared case-insensitively against every directory segment below the root.
EXCLUDED_DIRECTORIES = frozenset(
    {
        ".git",
        "node_modules",
        "bin",
        "obj",
        "dist",
        ".dist",
        "env",
        ".env",
        "venv",
        ".venv",
        "packages",
        ".vs",
        "debug",
        "release",
    }
)

# Matched as suffixes of the lower-cased file name so compound markers
# such as ".designer.cs" or ".min.js" are caught.
EXCLUDED_FILE_PATTERNS: tuple[str, ...] = (
    # Binary and package files
    ".exe",
    ".dll",
    ".pdb",
    ".cache",
    ".suo",
    ".user",
    ".lock",
    ".bin",
    ".obj",
    ".zip",
    ".tar",
    ".gz",
    ".7z",
    ".rar",
    # Images
    ".jpg",
    ".jpeg",
    ".png",
    ".gif",
    ".ico",
    ".pdf",
    ".svg",
    # Documents
    ".doc",
    ".docx",
    ".xls",
    ".xlsx",
    # Databases
    ".db",
    ".sqlite",
    ".mdf",
    ".ldf",
    # Minified web assets
    ".min.js",
    ".min.css",
    # Fonts
    ".woff",
    ".woff2",
    ".ttf",
    ".eot",
    ".otf",
    # Auto-generated sources
    ".designer.cs",
    ".generated.cs",
    ".g.cs",
    ".g.i.cs",
    # Resources
    ".resources",
    ".resx",
)

NO_EXTENSION = "(no extension)"


def file_extension(name: str) -> str:
    """Return the lower-cased extension of a file name, dot included.

    Unlike ``Path.suffix`` a leading dot counts, so ``.env`` has the
    extension ``.env``. A trailing dot means no extension.
    """
    idx = name.rfind(".")
    if idx == -1 or idx == len(name) - 1:
        return ""
    return name[idx:].lower()


def is_excluded_directory(name: str) -> bool:
    """Check a single directory name against the deny-set."""
    return name.lower() in EXCLUDED_DIRECTORIES


def is_excluded_file(name: str) -> bool:
    """True when a file has no extension or ends with a denied suffix."""
    if not file_extension(name):
        return True
    lowered = name.lower()
    return any(lowered.endswith(pattern) for pattern in EXCLUDED_FILE_PATTERNS)


def categorize(extension: str, table: Iterable[FileTypeInfo] = FILE_TYPES) -> FileCategory:
    """Map an extension to its category; unknown extensions are OTHER."""
    for info in table:
        if extension in info.extensions:
            return info.category
    return FileCategory.OTHER
