"""Rich terminal formatter for Code Census."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..analysis.models import CodeStatistics
from .base import BaseFormatter

console = Console(stderr=True)


def _complexity_label(score: float) -> str:
    if score > 5.0:
        return "[red bold]high[/red bold]"
    elif score > 2.0:
        return "[yellow]moderate[/yellow]"
    else:
        return "[green]low[/green]"


class RichFormatter(BaseFormatter):
    """Summary panel, per-extension table, findings and recommendations."""

    def __init__(self, target: Optional[Console] = None) -> None:
        self.console = target or console

    def render(self, stats: CodeStatistics) -> None:
        self._print(stats, self.console)

    def format(self, stats: CodeStatistics) -> str:
        buffer = Console(file=io.StringIO(), record=True, width=100)
        self._print(stats, buffer)
        return buffer.export_text()

    def _print(self, stats: CodeStatistics, out: Console) -> None:
        self._print_summary(stats, out)
        self._print_extensions(stats, out)
        self._print_insights(stats, out)

    @staticmethod
    def _print_summary(stats: CodeStatistics, out: Console) -> None:
        structure = stats.project_structure
        complexity = stats.complexity.average_file_complexity
        summary = (
            f"[bold]Files analyzed:[/bold] {stats.total_files}\n"
            f"[bold]Directories:[/bold] {structure.directory_count} "
            f"(max depth {structure.max_depth})\n"
            f"[bold]Lines:[/bold] {stats.total_lines} "
            f"({stats.total_non_blank_lines} non-blank, {stats.total_blank_lines} blank)\n"
            f"[bold]Characters:[/bold] {stats.total_characters}\n"
            f"[bold]Average complexity:[/bold] {complexity:.2f} ({_complexity_label(complexity)})"
        )
        out.print(Panel(summary, title="[bold cyan]CODE CENSUS[/bold cyan]", expand=False))
        out.print()

    @staticmethod
    def _print_extensions(stats: CodeStatistics, out: Console) -> None:
        if not stats.files_by_extension:
            out.print("[yellow]No analyzable files found.[/yellow]")
            out.print()
            return

        table = Table(title="Files by extension", show_lines=False)
        table.add_column("Extension", style="cyan")
        table.add_column("Files", justify="right")
        table.add_column("Lines", justify="right")
        table.add_column("Avg lines", justify="right")
        table.add_column("Max line", justify="right")
        table.add_column("Complexity", justify="right")

        for extension, count in stats.files_by_extension.items():
            table.add_row(
                escape(extension),
                str(count),
                str(stats.lines_by_extension.get(extension, 0)),
                f"{stats.average_lines_per_file_by_extension.get(extension, 0.0):.1f}",
                str(stats.max_characters_per_line_by_extension.get(extension, 0)),
                f"{stats.complexity.complexity_by_extension.get(extension, 0.0):.2f}",
            )
        out.print(table)
        out.print()

    @staticmethod
    def _print_insights(stats: CodeStatistics, out: Console) -> None:
        insights = stats.insights

        if stats.complexity.high_complexity_files:
            out.print("[bold]High complexity files:[/bold]")
            for path in stats.complexity.high_complexity_files:
                out.print(f"  {escape(path)}")
            out.print()

        if insights.key_findings:
            out.print("[bold]Findings:[/bold]")
            for finding in insights.key_findings:
                out.print(f"  [yellow]•[/yellow] {finding}")
            out.print()

        if insights.recommendations:
            out.print("[bold]Recommendations:[/bold]")
            for area, text in insights.recommendations.items():
                out.print(f"  [cyan]{area}:[/cyan] {text}")
            out.print()

        for name, value in insights.metrics.items():
            out.print(f"  {name:22s} {value:8.2f}")
