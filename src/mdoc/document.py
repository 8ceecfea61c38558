"""mdoc documents.

The mdoc language supports authoring of manual pages for the man(1)
utility by allowing semantic annotations of words, phrases, page
sections and complete manual pages.

A document is a sequence of lines. ``Document`` always starts with the
header every manual page needs; ``Fragment`` is the same sequence
without one, for composing pieces of a page.

Example:
    doc = Document(
        DocumentTitle(title="FOO", section="1"),
        name="foo",
        description="do a foo thing",
    )
    doc.add_section("synopsis", [text_line([roman("foo [-v]")])])
    print(doc.render())
"""

from __future__ import annotations

import copy
import io
import logging
from pathlib import Path
from typing import Any, Iterable, TextIO

from pydantic import BaseModel, ConfigDict

from mdoc.builders import to_line
from mdoc.escape import quote_argument
from mdoc.inline import INLINE_TYPES
from mdoc.line import LINE_TYPES, ControlLine, TextLine, control_line

logger = logging.getLogger(__name__)

# Placeholder expanded by version control tooling and understood by mandoc.
MDOCDATE = "$Mdocdate$"

HEADER_LENGTH = 6


class DocumentDate(BaseModel):
    """Publication date of the page, one token per field."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    month: str
    day: str
    year: str


class DocumentTitle(BaseModel):
    """Page title, manual section and optional architecture."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    title: str
    section: str
    arch: str | None = None


class OperatingSystem(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    system: str
    version: str | None = None


class Fragment:
    """A sequence of mdoc lines without a header.

    Builder methods append and return the fragment so calls chain.
    """

    def __init__(self, lines: Iterable[ControlLine | TextLine] = ()) -> None:
        self.lines: list[ControlLine | TextLine] = list(lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self.lines)} lines)"

    def append(self, line: ControlLine | TextLine) -> Fragment:
        self.lines.append(line)
        return self

    def control(self, name: str, args: Iterable[str] = ()) -> Fragment:
        """Append a control line.

        The line consists of the name of a built-in request or macro and
        some number of arguments. Arguments that are empty or contain
        whitespace are enclosed in double quotation marks.
        """
        self.lines.append(control_line(name, [quote_argument(str(a)) for a in args]))
        return self

    def text(self, inlines: Iterable[Any]) -> Fragment:
        """Append a text line.

        The line is rendered so that it can't be interpreted as a control
        line. The caller does not need to ensure, for example, that it
        doesn't start with a period or an apostrophe.
        """
        if isinstance(inlines, (str, *INLINE_TYPES)):
            inlines = [inlines]
        self.lines.append(to_line(tuple(inlines)))
        return self

    def add_section(
        self, heading: str, lines: Iterable[ControlLine | TextLine] = ()
    ) -> Fragment:
        """Append a section heading (upper-cased) followed by ``lines``."""
        self.lines.append(control_line("Sh", [heading.upper()]))
        self.lines.extend(lines)
        return self

    def extend(self, items: Iterable[Any]) -> Fragment:
        """Append the lines of every document-convertible item."""
        for item in items:
            self.lines.extend(to_lines(item))
        return self

    def __add__(self, other: Any) -> Fragment:
        new = copy.copy(self)
        new.lines = list(self.lines)
        new.lines.extend(to_lines(other))
        return new

    def __iadd__(self, other: Any) -> Fragment:
        self.lines.extend(to_lines(other))
        return self

    def render_to(self, out: TextIO) -> None:
        """Write the mdoc source to a text sink.

        Errors raised by the sink propagate; the document is unchanged,
        so rendering again from scratch is always safe.
        """
        for line in self.lines:
            line.render(out)

    def render(self) -> str:
        """Render as mdoc source text that can be fed to an mdoc implementation."""
        buf = io.StringIO()
        self.render_to(buf)
        logger.debug("Rendered %d lines", len(self.lines))
        return buf.getvalue()

    def to_mdoc(self) -> str:
        return self.render()

    def write(self, path: Path | str, encoding: str = "utf-8") -> Path:
        """Render into the file at ``path``, replacing it."""
        path = Path(path)
        with path.open("w", encoding=encoding) as f:
            self.render_to(f)
        logger.debug("Wrote %s", path)
        return path


class Document(Fragment):
    """An mdoc manual page.

    Construction emits the header, in order: ``Dd``, ``Dt``, ``Os``,
    ``Sh NAME``, ``Nm`` and ``Nd``. Those lines can only be appended to.
    """

    def __init__(
        self,
        title: DocumentTitle,
        name: str,
        description: str,
        date: DocumentDate | None = None,
        os: OperatingSystem | None = None,
    ) -> None:
        super().__init__()
        self.date = date
        self.title = title
        self.os = os
        self.name = name
        self.description = description
        self.lines.extend(self._header())
        logger.debug("Created document %s(%s)", title.title, title.section)

    def _header(self) -> list[ControlLine]:
        if self.date is not None:
            date_args = [self.date.month, self.date.day, self.date.year]
        else:
            date_args = [MDOCDATE]

        title_args = [self.title.title, self.title.section]
        if self.title.arch is not None:
            title_args.append(self.title.arch)

        os_args = []
        if self.os is not None:
            os_args.append(self.os.system)
            if self.os.version is not None:
                os_args.append(self.os.version)

        return [
            control_line("Dd", date_args),
            control_line("Dt", title_args),
            control_line("Os", os_args),
            control_line("Sh", ["NAME"]),
            control_line("Nm", [self.name]),
            control_line("Nd", [self.description]),
        ]

    @property
    def header(self) -> list[ControlLine | TextLine]:
        return self.lines[:HEADER_LENGTH]

    def body(self) -> Fragment:
        """Everything after the header, as a fragment safe to merge elsewhere."""
        return Fragment(self.lines[HEADER_LENGTH:])


def to_lines(item: Any) -> list[ControlLine | TextLine]:
    """Lines of a document-convertible item.

    Fragments and documents give all their lines (a document's header
    included), a line gives itself, and an inline element or a string
    gives one text line.
    """
    if isinstance(item, Fragment):
        return list(item.lines)
    if isinstance(item, LINE_TYPES):
        return [item]
    if isinstance(item, INLINE_TYPES) or isinstance(item, str):
        return [to_line(item)]
    raise TypeError(f"Cannot convert {type(item).__name__} to mdoc lines")


def concat(*items: Any) -> Fragment:
    """Fold document-convertible items into one header-less fragment.

    Merging complete documents keeps every header; use ``Document.body()``
    to merge only the content of a page.
    """
    return Fragment().extend(items)

