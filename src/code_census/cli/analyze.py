"""Main analysis command."""

from pathlib import Path
from typing import Optional

import click
import typer
from rich.markup import escape

from ..analysis.models import CodeStatistics
from ..api import run_analysis
from ..exceptions import CodeCensusError
from ..formatters import JsonFormatter, RichFormatter
from ..logging_config import setup_logging
from . import app
from ._common import console, resolve_config


@app.command()
def analyze_command(
    path: Path = typer.Argument(
        Path("."),
        help="Directory to analyze",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Include every file's details, grouped by extension",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="JSON report path (default: ./code_analysis_results.json)",
        dir_okay=False,
    ),
    fmt: str = typer.Option(
        "json",
        "--format",
        "-f",
        help="json: write the report only | rich: also print a summary",
        click_type=click.Choice(["json", "rich"], case_sensitive=False),
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel workers (default: auto-detect)",
        min=1,
        max=32,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress logging and the completion message",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Measure a codebase: file counts, line and character statistics,
    file-type distribution, complexity outliers and recommendations.

    [bold cyan]Examples:[/bold cyan]

      code-census /path/to/project

      code-census . --verbose --output stats.json

      code-census . --format rich
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]Code Census[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    try:
        settings = resolve_config(
            config=config,
            verbose=verbose,
            output=output,
            workers=workers,
            debug=debug,
            quiet=quiet,
        )
    except CodeCensusError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    logger = setup_logging(
        verbose=settings.verbosity == "verbose",
        quiet=settings.verbosity == "quiet",
        log_file=settings.log_file,
    )

    try:
        stats = run_analysis(path, settings)
        output_path = _write_report(stats, Path(settings.output_file))

        if fmt.lower() == "rich":
            RichFormatter(console).render(stats)

        if settings.verbosity != "quiet":
            console.print(f"Analysis complete. Results written to: {escape(str(output_path))}")

    except typer.Exit:
        raise

    except CodeCensusError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during analysis")
        console.print(f"[red]Error during analysis:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _write_report(stats: CodeStatistics, output_file: Path) -> Path:
    """Write the JSON report; relative paths resolve against the working directory."""
    output_path = output_file if output_file.is_absolute() else Path.cwd() / output_file
    output_path.write_text(JsonFormatter().format(stats), encoding="utf-8")
    return output_path
