"""Man command implementation: mdoc's own manual page."""

import typer

from mdoc.adapters import document_from_command
from mdoc.display import print_error
from mdoc.document import Document
from mdoc.exceptions import MdocError


def man_command(app: typer.Typer, author: str | None = None) -> Document:
    """Print the manual page of ``app`` and return it."""
    try:
        doc = document_from_command(typer.main.get_command(app), name="mdoc", author=author)
    except MdocError as e:
        print_error(e.message)
        raise SystemExit(1) from None

    typer.echo(doc.render(), nl=False)
    return doc
