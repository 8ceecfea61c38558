"""mdoc CLI - Main entry point.

Commands:
- render: Render a page file to mdoc source
- init: Write a starter page file
- man: Print mdoc's own manual page
- demo: Print an example manual page
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdoc import __version__
from mdoc.commands import demo_command, init_command, man_command, render_command
from mdoc.display import setup_logging

app = typer.Typer(
    name="mdoc",
    help="mdoc - Generate manual pages in the mdoc format.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"mdoc {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log debug messages to stderr.")
    ] = False,
) -> None:
    """mdoc - Generate manual pages in the mdoc format."""
    setup_logging(verbose)


@app.command()
def render(
    page: Annotated[Path, typer.Argument(help="YAML page file")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
) -> None:
    """Render a page file to mdoc source.

    Examples:
        mdoc render foo.1.yaml
        mdoc render foo.1.yaml -o foo.1
    """
    render_command(page, output)


@app.command()
def init(
    name: Annotated[str, typer.Argument(help="Program name")],
    section: Annotated[str, typer.Option("--section", "-s", help="Manual section")] = "1",
    description: Annotated[
        Optional[str],
        typer.Option("--description", "-d", help="One-line description"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Page file path (default: NAME.SECTION.yaml)"),
    ] = None,
) -> None:
    """Write a starter page file.

    Examples:
        mdoc init foo
        mdoc init foo -s 8 -d "manage foo daemons"
    """
    init_command(name, section, description, output)


@app.command()
def man(
    author: Annotated[
        Optional[str], typer.Option("--author", help="Add an AUTHORS section")
    ] = None,
) -> None:
    """Print the manual page of mdoc itself."""
    man_command(app, author)


@app.command()
def demo() -> None:
    """Print an example manual page."""
    demo_command()


if __name__ == "__main__":
    app()
