"""mdoc CLI commands.

Each command module contains the business logic for a CLI command.
The cli.py module handles typer decorators and argument parsing,
then delegates to these command functions.
"""

from mdoc.commands.demo import build_demo_document, demo_command
from mdoc.commands.init import init_command
from mdoc.commands.man import man_command
from mdoc.commands.render import render_command

__all__ = [
    "build_demo_document",
    "demo_command",
    "init_command",
    "man_command",
    "render_command",
]
