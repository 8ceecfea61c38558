"""Lines of an mdoc document and the rendering of a single line.

A line is either a control line (a request or macro invocation) or a
text line made of inline elements. All mdoc code generation and the
special handling of control characters happens in ``render_line``.
"""

import io
from typing import Annotated, Iterable, Literal, TextIO, Union

from pydantic import BaseModel, ConfigDict, Field

from mdoc.escape import (
    CONTROL_CHAR,
    NO_BREAK_CONTROL_CHAR,
    ZERO_WIDTH,
    escape_backslashes,
    escape_embedded_control_chars,
    escape_hyphens,
    starts_with_control_char,
)
from mdoc.inline import Bold, Inline, Italic, LineBreak, Roman

FONT_ITALIC = "\\fI"
FONT_BOLD = "\\fB"
FONT_ROMAN = "\\fR"


class _LineBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    def render(self, out: TextIO) -> None:
        """Write the line, newline terminated, to ``out``."""
        render_line(self, out)  # type: ignore[arg-type]

    def to_mdoc(self) -> str:
        buf = io.StringIO()
        self.render(buf)
        return buf.getvalue()


class ControlLine(_LineBase):
    """A control line.

    Arguments are written as given, separated by single spaces.
    """

    kind: Literal["control"] = "control"
    name: str
    args: tuple[str, ...] = ()


class TextLine(_LineBase):
    """A text line, consisting of inline elements."""

    kind: Literal["text"] = "text"
    inlines: tuple[Inline, ...] = ()


Line = Annotated[Union[ControlLine, TextLine], Field(discriminator="kind")]

LINE_TYPES = (ControlLine, TextLine)


def control_line(name: str, args: Iterable[str] = ()) -> ControlLine:
    return ControlLine(name=name, args=tuple(args))


def text_line(inlines: Iterable[Inline] = ()) -> TextLine:
    return TextLine(inlines=tuple(inlines))


def cross_reference(title: str, section: str) -> ControlLine:
    """Reference another manual page, e.g. ``.Xr mandoc 1``."""
    return control_line("Xr", [title, section])


# Repeats the document name in the body.
NAME_LINE = control_line("Nm")


def render_line(line: ControlLine | TextLine, out: TextIO) -> None:
    """Generate one mdoc line.

    Only ``out.write`` can fail; every line has a rendering.
    """
    match line:
        case ControlLine(name=name, args=args):
            out.write(CONTROL_CHAR + name)
            for arg in args:
                out.write(" " + arg)
            out.write("\n")
        case TextLine(inlines=inlines):
            _render_text(inlines, out)
        case _:
            raise TypeError(f"Not an mdoc line: {line!r}")


def _render_text(inlines: Iterable[Inline], out: TextIO) -> None:
    at_line_start = True
    ended_with_break = False

    for inline in inlines:
        match inline:
            case LineBreak():
                # The break is a control line of its own, so its period
                # must not be escaped.
                out.write(CONTROL_CHAR + "br\n" if at_line_start else "\n" + CONTROL_CHAR + "br\n")
                at_line_start = True
                ended_with_break = True
                continue
            case Roman(text=text):
                text = escape_embedded_control_chars(escape_hyphens(escape_backslashes(text)))
                if at_line_start and (
                    starts_with_control_char(text) or text.startswith(NO_BREAK_CONTROL_CHAR)
                ):
                    # Only where the text begins an output line; the
                    # embedded pass cannot know that.
                    text = ZERO_WIDTH + text
            case Italic(text=text):
                text = FONT_ITALIC + escape_embedded_control_chars(escape_backslashes(text)) + FONT_ROMAN
            case Bold(text=text):
                text = FONT_BOLD + escape_embedded_control_chars(escape_backslashes(text)) + FONT_ROMAN
            case _:
                raise TypeError(f"Not an inline element: {inline!r}")

        if text:
            out.write(text)
            ended_with_break = False
            at_line_start = text.endswith("\n")

    if not ended_with_break:
        out.write("\n")
