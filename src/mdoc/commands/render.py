"""Render command implementation."""

from pathlib import Path

import typer

from mdoc.config import load_page
from mdoc.display import print_error, print_success
from mdoc.exceptions import MdocError


def render_command(page_path: Path, output: Path | None = None) -> None:
    """Render a page file to mdoc source on stdout or into ``output``."""
    try:
        doc = load_page(page_path).to_document()
    except MdocError as e:
        print_error(e.message)
        raise SystemExit(1) from None

    if output is None:
        typer.echo(doc.render(), nl=False)
        return

    try:
        doc.write(output)
    except OSError as e:
        print_error(f"Failed to write {output}: {e}")
        raise SystemExit(1) from None
    print_success(f"Wrote {output}")
