"""CLI entry point: registers the analyze command."""

import typer

app = typer.Typer(
    name="code-census",
    help="Code Census - Codebase size and complexity statistics",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .analyze import analyze_command as _analyze_command  # noqa: F401, E402


def main() -> None:
    app()
