"""Inline content of text lines.

The text stored in each variant is kept exactly as received from the
caller. Escaping happens only when the containing line is rendered.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Roman(BaseModel):
    """Text in the roman font, the normal font if nothing else is chosen."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["roman"] = "roman"
    text: str


class Italic(BaseModel):
    """Text in the italic (slanted) font."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["italic"] = "italic"
    text: str


class Bold(BaseModel):
    """Text in a bold face font."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bold"] = "bold"
    text: str


class LineBreak(BaseModel):
    """A hard line break inside a paragraph."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["line_break"] = "line_break"


Inline = Annotated[Union[Roman, Italic, Bold, LineBreak], Field(discriminator="kind")]

INLINE_TYPES = (Roman, Italic, Bold, LineBreak)


def roman(text: str) -> Roman:
    """Return some inline text in the roman font."""
    return Roman(text=text)


def italic(text: str) -> Italic:
    return Italic(text=text)


def bold(text: str) -> Bold:
    return Bold(text=text)


def line_break() -> LineBreak:
    return LineBreak()
