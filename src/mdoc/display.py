"""Rich display utilities for the mdoc CLI.

Messages go to stderr; stdout is reserved for rendered mdoc source.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]✓[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]✗[/] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[bold blue]ℹ[/] {message}")


def print_page_created(path: Path, name: str) -> None:
    """Print page file creation success."""
    console.print()
    console.print(
        Panel(
            f"[bold green]Page file created![/]\n\n"
            f"[bold]Name:[/] {name}\n"
            f"[bold]Path:[/] {path}\n\n"
            f"[dim]Next steps:[/]\n"
            f"  1. Edit [cyan]{path}[/] to describe {name}\n"
            f"  2. Run [cyan]mdoc render {path}[/] to see the mdoc source\n"
            f"  3. Run [cyan]mdoc render {path} | mandoc -a[/] to view it",
            title="[bold]mdoc[/]",
            border_style="green",
        )
    )


def setup_logging(verbose: bool) -> None:
    """Send mdoc log records to the console."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
