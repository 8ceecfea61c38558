"""mdoc - documents in the mdoc manual page format.

Build a page as a sequence of control and text lines and render it to
source text for mandoc(1) or groff(1):

    from mdoc import Document, DocumentTitle, bold, roman

    doc = Document(DocumentTitle(title="FOO", section="1"), "foo", "do a foo thing")
    doc.add_section("description", [])
    doc.text([roman("The "), bold("foo"), roman(" utility does a foo thing.")])
    print(doc.render())
"""

from mdoc.builders import lines, to_line
from mdoc.document import (
    HEADER_LENGTH,
    MDOCDATE,
    Document,
    DocumentDate,
    DocumentTitle,
    Fragment,
    OperatingSystem,
    concat,
    to_lines,
)
from mdoc.escape import (
    escape_embedded_control_chars,
    quote_argument,
    starts_with_control_char,
)
from mdoc.exceptions import (
    AdapterError,
    ConfigurationError,
    MdocError,
    PageConfigError,
    PageExistsError,
    PageNotFoundError,
)
from mdoc.inline import Bold, Inline, Italic, LineBreak, Roman, bold, italic, line_break, roman
from mdoc.line import (
    NAME_LINE,
    ControlLine,
    Line,
    TextLine,
    control_line,
    cross_reference,
    render_line,
    text_line,
)

__version__ = "0.1.0"

__all__ = [
    # Document
    "Document",
    "DocumentDate",
    "DocumentTitle",
    "Fragment",
    "OperatingSystem",
    "HEADER_LENGTH",
    "MDOCDATE",
    "concat",
    "to_lines",
    # Lines
    "Line",
    "ControlLine",
    "TextLine",
    "NAME_LINE",
    "control_line",
    "text_line",
    "cross_reference",
    "render_line",
    "lines",
    "to_line",
    # Inline
    "Inline",
    "Roman",
    "Italic",
    "Bold",
    "LineBreak",
    "roman",
    "italic",
    "bold",
    "line_break",
    # Escape utilities
    "starts_with_control_char",
    "escape_embedded_control_chars",
    "quote_argument",
    # Exceptions
    "MdocError",
    "ConfigurationError",
    "PageNotFoundError",
    "PageConfigError",
    "PageExistsError",
    "AdapterError",
]
