"""Tests for per-file metric extraction."""

import pytest

from code_census.exceptions import FileAccessError
from code_census.scanning import extractor
from code_census.scanning.classifier import FileCategory
from code_census.scanning.extractor import (
    branching_depth,
    complexity_score,
    extract_record,
    indentation_levels,
    is_generated,
    is_test_path,
    should_skip_content,
    split_lines,
)
from code_census.scanning.models import MetricName


def _write(tmp_path, name, content):
    path = tmp_path / name
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, str):
        content = content.encode("utf-8")
    path.write_bytes(content)
    return path


class TestSplitLines:
    def test_trailing_newline_does_not_add_line(self):
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_mixed_line_breaks(self):
        assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]

    def test_empty_text_has_no_lines(self):
        assert split_lines("") == []

    def test_blank_lines_kept(self):
        assert split_lines("a\n\n\nb") == ["a", "", "", "b"]


class TestHeuristics:
    def test_indentation_uses_four_column_units(self):
        lines = ["def f():", "    if x:", "        return 1", "", "           "]
        assert indentation_levels(lines) == 2

    def test_indentation_rounds_down(self):
        assert indentation_levels(["  x", "   y"]) == 0
        assert indentation_levels(["       z"]) == 1

    def test_indentation_of_no_lines_is_zero(self):
        assert indentation_levels([]) == 0
        assert indentation_levels(["", "   "]) == 0

    def test_branching_requires_keyword_and_space(self):
        lines = [
            "if x",
            "  else:",
            "elsewhere()",
            "for(i=0)",
            "foreach (a in b)",
            "do {",
            "while (true)",
            "switch (x)",
            "    case 1:",
        ]
        assert branching_depth(lines) == 6

    def test_complexity_weights(self):
        assert complexity_score(0, 2) == pytest.approx(1.4)
        assert complexity_score(3, 1) == pytest.approx(0.3 * 3 + 0.7 * 1)
        assert complexity_score(0, 0) == 0

    def test_test_path_detection(self):
        assert is_test_path("tests/AppTests.cs")
        assert is_test_path("web/app.SPEC.js")
        assert not is_test_path("src/App.cs")

    def test_generated_by_path_marker(self):
        assert is_generated("src/Client.g.ts", [])
        assert is_generated("src/Api.generated.ts", [])
        assert not is_generated("src/App.cs", ["class App {}"])

    def test_generated_by_header_in_first_five_lines(self):
        header = ["//", "// <Auto-Generated>", "//", "", "", "code"]
        assert is_generated("src/App.cs", header)
        late = ["", "", "", "", "", "// auto-generated"]
        assert not is_generated("src/App.cs", late)


class TestSkipRules:
    def test_single_line_script_and_style_skipped(self):
        assert should_skip_content("app.js", ".js", ["var a=1;"])
        assert should_skip_content("site.css", ".css", [])
        assert not should_skip_content("app.js", ".js", ["a", "b"])

    def test_single_line_other_types_kept(self):
        assert not should_skip_content("app.ts", ".ts", ["let a = 1;"])
        assert not should_skip_content("notes.md", ".md", ["# hi"])

    def test_migration_sources_skipped(self):
        assert should_skip_content("20240101120000_AddUsers.cs", ".cs", ["a", "b"])
        assert not should_skip_content("2024_AddUsers.cs", ".cs", ["a", "b"])

    def test_designer_and_generated_sources_skipped(self):
        assert should_skip_content("Form1.designer.partial.cs", ".cs", ["a", "b"])
        assert should_skip_content("Api.generated.v2.cs", ".cs", ["a", "b"])
        assert should_skip_content("View.G.CS", ".cs", ["a", "b"])


class TestExtractRecord:
    def test_branching_example(self, tmp_path):
        path = _write(tmp_path, "sample.cs", "if (x) { }\n  else { }\n")
        record = extract_record(path, tmp_path)
        assert record is not None
        assert record.indentation_levels == 0
        assert record.branching_depth == 2
        assert record.complexity == pytest.approx(1.4)

    def test_line_and_character_counts(self, tmp_path):
        path = _write(tmp_path, "notes.md", "# Title\n\n   \nbody text\n")
        record = extract_record(path, tmp_path)
        assert record.total_lines == 4
        assert record.blank_lines == 2
        assert record.non_blank_lines == 2
        assert record.blank_lines + record.non_blank_lines == record.total_lines
        assert record.total_characters == 7 + 0 + 3 + 9
        assert record.max_line_length == 9
        assert record.characters_per_line == pytest.approx((7 + 9) / 2)

    def test_record_fields(self, tmp_path):
        path = _write(tmp_path, "src/App.CS", "class App\n{\n}\n")
        record = extract_record(path, tmp_path)
        assert record.path == path
        assert record.relative_path == "src/App.CS"
        assert record.extension == ".cs"
        assert record.category is FileCategory.SOURCE
        assert record.metrics == {
            MetricName.CYCLOMATIC_COMPLEXITY: 0.0,
            MetricName.STRUCTURAL_COMPLEXITY: 0.0,
            MetricName.LINES_OF_CODE: 3.0,
        }

    def test_complexity_invariant(self, tmp_path):
        content = "if a\n    while b\n        do c\n            x\n"
        record = extract_record(_write(tmp_path, "loop.cs", content), tmp_path)
        expected = 0.3 * record.indentation_levels + 0.7 * record.branching_depth
        assert record.complexity == pytest.approx(expected)
        assert record.complexity >= 0

    def test_all_blank_file_returns_none(self, tmp_path):
        assert extract_record(_write(tmp_path, "blank.md", "\n\n  \n"), tmp_path) is None

    def test_empty_file_kept_with_zero_average(self, tmp_path):
        record = extract_record(_write(tmp_path, "empty.cs", ""), tmp_path)
        assert record is not None
        assert record.total_lines == 0
        assert record.characters_per_line == 0.0

    def test_utf16_with_bom(self, tmp_path):
        data = b"\xff\xfe" + "hello\nworld\n".encode("utf-16-le")
        record = extract_record(_write(tmp_path, "wide.txt", data), tmp_path)
        assert record is not None
        assert record.total_lines == 2
        assert record.total_characters == 10

    def test_utf8_bom_not_counted(self, tmp_path):
        record = extract_record(_write(tmp_path, "bom.md", b"\xef\xbb\xbfabc\n"), tmp_path)
        assert record.total_characters == 3

    def test_binary_content_returns_none(self, tmp_path):
        data = b"abc" + b"\x00" * 509
        assert extract_record(_write(tmp_path, "blob.cs", data), tmp_path) is None

    def test_single_line_js_returns_none(self, tmp_path):
        assert extract_record(_write(tmp_path, "one.js", "var a = 1;\n"), tmp_path) is None

    def test_test_and_generated_flags(self, tmp_path):
        path = _write(tmp_path, "spec/Api.cs", "// <auto-generated />\nclass Api {}\n")
        record = extract_record(path, tmp_path)
        assert record.is_test is True
        assert record.is_generated is True

    def test_markers_in_ancestor_directories_count(self, plain_root):
        root = plain_root / "specs_root"
        path = _write(root, "Api.cs", "class Api\n{\n}\n")
        record = extract_record(path, root)
        assert record.relative_path == "Api.cs"
        assert record.is_test is True

    def test_unmarked_path_is_not_test(self, plain_root):
        path = _write(plain_root, "src/App.cs", "class App\n{\n}\n")
        record = extract_record(path, plain_root)
        assert record.is_test is False
        assert record.is_generated is False

    def test_generated_marker_in_ancestor(self, plain_root):
        root = plain_root / "client.g.out"
        path = _write(root, "Api.cs", "class Api\n{\n}\n")
        assert extract_record(path, root).is_generated is True

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileAccessError):
            extract_record(tmp_path / "missing.cs", tmp_path)

    def test_complexity_failure_keeps_record(self, tmp_path, monkeypatch):
        def _boom(lines):
            raise RuntimeError("boom")

        monkeypatch.setattr(extractor, "branching_depth", _boom)
        path = _write(tmp_path, "deep.cs", "if a\n        if b\n")
        record = extract_record(path, tmp_path)
        assert record is not None
        assert record.total_lines == 2
        assert record.complexity == 0
        assert record.indentation_levels == 0
        assert record.branching_depth == 0
