"""Command-line interface for Qualytics."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from . import __version__
from .api import analyze_path
from .config import load_config
from .exceptions import QualyticsError
from .formatters import AnalyzedFile, get_formatter
from .logging_config import setup_logging

app = typer.Typer(
    name="qualytics",
    help="Qualytics - code quality metrics for ESTree syntax trees",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console(stderr=True)


@app.command()
def analyze(
    paths: List[Path] = typer.Argument(
        ...,
        help="ESTree JSON files (e.g. typescript-estree output with loc: true)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    fmt: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table (human-readable) or json",
    ),
    no_functions: bool = typer.Option(
        False,
        "--no-functions",
        help="Only report file-level metrics",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Threads for per-function metrics",
        min=1,
        max=32,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
):
    """
    Compute LOC, cyclomatic complexity, maintainability and inheritance depth.

    [bold cyan]Examples:[/bold cyan]

      qualytics analyze build/ast/service.json

      qualytics analyze build/ast/*.json --format json --no-functions
    """
    try:
        overrides = {
            "workers": workers,
            "verbose": verbose,
            "quiet": quiet,
            "log_file": str(log_file) if log_file else None,
        }
        if no_functions:
            overrides["include_functions"] = False
        settings = load_config(config_file=config, **overrides)
        setup_logging(settings)
        formatter = get_formatter(fmt, settings)

        results = [
            AnalyzedFile(path=str(path), analysis=analyze_path(path, config=settings, strict=True))
            for path in paths
        ]
        formatter.render(results)

    except QualyticsError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)


@app.command()
def version():
    """Show the installed version."""
    typer.echo(f"qualytics {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
