#!/usr/bin/env python3
"""
Example: Basic usage of Code Census as a Python library
"""

from code_census import analyze
from code_census.formatters import JsonFormatter

# Analyze a codebase, including the per-extension file listing
stats = analyze("/path/to/project", verbose=True, workers=4)

print(f"{stats.total_files} files, {stats.total_lines} lines "
      f"({stats.total_non_blank_lines} non-blank)")

for extension, count in stats.files_by_extension.items():
    print(f"  {extension:16s} {count:6d} files  {stats.lines_by_extension[extension]:8d} lines")

for path in stats.complexity.high_complexity_files:
    print(f"  complex: {path}")

for area, text in stats.insights.recommendations.items():
    print(f"  {area}: {text}")

with open("code_analysis_results.json", "w", encoding="utf-8") as f:
    f.write(JsonFormatter().format(stats))
