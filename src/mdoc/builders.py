"""Terse construction of mdoc lines.

Example:
    body = lines(
        "The mandoc utility formats manual pages for display.",
        [roman("See "), bold("mandoc"), roman(" for details.")],
        NAME_LINE,
    )
    doc.add_section("description", body)
"""

from typing import Any

from mdoc.inline import INLINE_TYPES, Roman
from mdoc.line import LINE_TYPES, ControlLine, TextLine


def to_line(item: Any) -> ControlLine | TextLine:
    """Convert one item to a line.

    A line passes through, an inline element or a string becomes a text
    line holding just that element (strings in the roman font), and a
    list or tuple becomes one text line of its elements.
    """
    if isinstance(item, LINE_TYPES):
        return item
    if isinstance(item, (list, tuple)):
        return TextLine(inlines=tuple(_to_inline(i) for i in item))
    return TextLine(inlines=(_to_inline(item),))


def _to_inline(item: Any):
    if isinstance(item, INLINE_TYPES):
        return item
    if isinstance(item, str):
        return Roman(text=item)
    raise TypeError(f"Cannot use {type(item).__name__} as inline mdoc content")


def lines(*items: Any) -> list[ControlLine | TextLine]:
    """Build a list of lines, one per item."""
    return [to_line(item) for item in items]
