"""Shared test fixtures for Code Census tests."""

import tempfile
from pathlib import Path

import pytest

from code_census.scanning.classifier import categorize, file_extension
from code_census.scanning.models import FileRecord


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def write_tree(root: Path, files: dict) -> Path:
    """Create files under root. Values are str (UTF-8) or bytes."""
    for relative, content in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            content = content.encode("utf-8")
        target.write_bytes(content)
    return root


CS_SOURCE = (
    "using System;\n"
    "\n"
    "namespace Demo\n"
    "{\n"
    "    public class App\n"
    "    {\n"
    "        public void Run(int x)\n"
    "        {\n"
    "            if (x > 0)\n"
    "            {\n"
    "                for (var i = 0; i < x; i++)\n"
    "                {\n"
    "                    Console.WriteLine(i);\n"
    "                }\n"
    "            }\n"
    "            else\n"
    "            {\n"
    "                return;\n"
    "            }\n"
    "        }\n"
    "    }\n"
    "}\n"
)

SAMPLE_FILES = {
    "src/App.cs": CS_SOURCE,
    "src/Models/User.cs": "namespace Demo\n{\n    public class User { }\n}\n",
    "tests/AppTests.cs": "// tests\nif (ok) { }\n",
    "web/index.html": "<html>\n  <body></body>\n</html>\n",
    "web/site.css": "body {\n  margin: 0;\n}\n",
    "web/app.js": "function main() {\n  if (x) { go(); }\n}\n",
    "web/vendor.js": "var a=1;",
    "web/vendor.min.js": "var a=1;\nvar b=2;\n",
    "docs/README.md": "# Demo\n\nSome words.\n",
    "config/app.ini": "[main]\nkey=value\n",
    "data/items.json": '{\n  "items": []\n}\n',
    "node_modules/lib/index.js": "module.exports = 1;\nmodule.exports = 2;\n",
    ".git/config": "[core]\n",
    "bin/Debug/out.txt": "build output\nmore\n",
    "assets/logo.png": b"\x89PNG\r\n\x1a\n" + b"\x00" * 64,
    "assets/blob.cs": b"ab" + b"\x00" * 200,
    "Makefile": "all:\n\techo hi\n",
}


@pytest.fixture
def sample_project(tmp_path):
    """A small mixed-language project with excluded directories and binaries."""
    root = tmp_path / "project"
    root.mkdir()
    return write_tree(root, SAMPLE_FILES)


@pytest.fixture
def record_factory(tmp_path):
    """Build FileRecords directly, keeping the line-count invariant."""

    def _make(name="a.cs", lines=10, blank=0, characters=100, max_line=20, cpl=None, **kwargs):
        ext = file_extension(name)
        non_blank = lines - blank
        defaults = dict(
            path=tmp_path / name,
            relative_path=name,
            extension=ext,
            category=categorize(ext),
            total_lines=lines,
            blank_lines=blank,
            non_blank_lines=non_blank,
            total_characters=characters,
            max_line_length=max_line,
            characters_per_line=cpl if cpl is not None else (
                characters / non_blank if non_blank else 0.0
            ),
        )
        defaults.update(kwargs)
        return FileRecord(**defaults)

    return _make


@pytest.fixture
def make_tree(tmp_path):
    """Write a {relative path: content} mapping under a fresh root directory."""

    def _make(files, name="tree"):
        root = tmp_path / name
        root.mkdir()
        return write_tree(root, files)

    return _make


@pytest.fixture
def plain_root():
    """A fresh directory outside pytest's basetemp.

    Test and generated-code detection look at the whole absolute path, and
    every tmp_path lives under a ``pytest-of-<user>`` directory.
    """
    with tempfile.TemporaryDirectory(prefix="census-") as name:
        root = Path(name).resolve()
        lowered = str(root).lower()
        if "test" in lowered or "spec" in lowered or ".g." in lowered:
            pytest.skip(f"temporary directory {root} carries a path marker")
        yield root


@pytest.fixture
def plain_sample_project(plain_root):
    """The sample project rooted outside pytest's basetemp."""
    root = plain_root / "project"
    root.mkdir()
    return write_tree(root, SAMPLE_FILES)
