"""Demo command implementation."""

import typer

from mdoc.document import Document, DocumentTitle
from mdoc.inline import roman
from mdoc.line import text_line


def build_demo_document() -> Document:
    doc = Document(
        DocumentTitle(title="test", section="1"),
        name="name",
        description="This is a description in one line.",
    )
    doc.add_section(
        "synopsis",
        [text_line([roman("The mandoc utility formats manual pages for display.")])],
    )
    return doc


def demo_command() -> None:
    """Print the example document."""
    typer.echo(build_demo_document().render())
