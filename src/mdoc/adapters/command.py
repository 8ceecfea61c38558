"""Manual page skeletons from click commands.

Works for any click command and for typer applications via
``typer.main.get_command(app)``. Commands are read through the
attributes click defines (``params``, ``opts``, ``commands``), since
newer typer releases ship their own copy of the click classes.
"""

import inspect
import logging
from typing import Any

import click

from mdoc.document import Document, DocumentTitle
from mdoc.exceptions import AdapterError
from mdoc.inline import roman

logger = logging.getLogger(__name__)

DEFAULT_METAVAR = "VALUE"


def document_from_command(
    command: Any,
    *,
    section: str = "1",
    author: str | None = None,
    name: str | None = None,
) -> Document:
    """Build a starter page for a command.

    Args:
        command: The click command to describe
        section: Manual section of the page
        author: Author name; adds an AUTHORS section when given
        name: Program name, defaults to the command name

    Returns:
        Document with NAME, SYNOPSIS and DESCRIPTION (and AUTHORS) sections
    """
    if not hasattr(command, "params") or not hasattr(command, "get_short_help_str"):
        raise AdapterError(f"Expected a click command, got {type(command).__name__}")

    cmd_name = name or command.name
    if not cmd_name:
        raise AdapterError("Command has no name; pass name=")

    doc = Document(
        DocumentTitle(title=cmd_name, section=section),
        name=cmd_name,
        description=command.get_short_help_str(limit=200),
    )

    doc.control("Sh", ["SYNOPSIS"])
    doc.control("Nm")
    for param in command.params:
        kind = getattr(param, "param_type_name", None)
        if kind == "option":
            _add_option(doc, param)
        elif kind == "argument":
            _add_argument(doc, param)
    if _is_group(command):
        doc.control("Ar", ["command"])
        doc.control("Op", ["Ar", "args", "..."])

    doc.control("Sh", ["DESCRIPTION"])
    if command.help:
        _add_help(doc, command.help)

    if _is_group(command) and command.commands:
        _add_commands(doc, command)

    if author:
        doc.control("Sh", ["AUTHORS"])
        doc.control("An", author.split())

    logger.debug("Derived %d lines from command %s", len(doc), cmd_name)
    return doc


def _is_group(command: Any) -> bool:
    return isinstance(getattr(command, "commands", None), dict)


def _add_help(doc: Document, help_text: str) -> None:
    # Indentation and blank lines would be breaks in fill mode.
    paragraphs = inspect.cleandoc(click.unstyle(help_text)).split("\n\n")
    first = True
    for paragraph in paragraphs:
        lines = [line.strip() for line in paragraph.splitlines()]
        lines = [line for line in lines if line and line != "\b"]
        if not lines:
            continue
        if not first:
            doc.control("Pp")
        doc.text([roman("\n".join(lines))])
        first = False


def _add_option(doc: Document, opt: Any) -> None:
    if getattr(opt, "hidden", False):
        return

    long = next((o for o in opt.opts if o.startswith("--")), None)
    short = next((o for o in opt.opts if not o.startswith("--")), None)

    args: list[str] = []
    if opt.required:
        macro = "Fl"
    else:
        macro = "Op"
        args.append("Fl")

    # Fl adds one dash of its own.
    if long is not None:
        args.append(long[1:])
        if short is not None:
            args.extend(["|", short[1:]])
    elif short is not None:
        args.append(short[1:])
    else:
        return

    if not getattr(opt, "is_flag", False) and not getattr(opt, "count", False):
        args.extend(["Ar", opt.metavar or DEFAULT_METAVAR])

    doc.control(macro, args)


def _add_argument(doc: Document, arg: Any) -> None:
    placeholder = (arg.metavar or arg.name or DEFAULT_METAVAR).upper()
    if arg.required:
        doc.control("Ar", [placeholder])
    else:
        doc.control("Op", ["Ar", placeholder])


def _add_commands(doc: Document, group: Any) -> None:
    doc.control("Sh", ["COMMANDS"])
    doc.control("Bl", ["-tag", "-width", "Ds"])
    for sub_name, sub in sorted(group.commands.items()):
        if getattr(sub, "hidden", False):
            continue
        doc.control("It", ["Cm", sub_name])
        doc.text([roman(sub.get_short_help_str(limit=200))])
    doc.control("El")

