"""mdoc escaping utilities.

The formatter treats a line starting with a period (or an apostrophe,
the no-break control character) as a request. Text handed to us may
contain either at the start of any of its lines, so it is rewritten
before it reaches the output.
"""

import re

CONTROL_CHAR = "."
NO_BREAK_CONTROL_CHAR = "'"

# Zero-width, non-printing glyph.
ZERO_WIDTH = "\\&"

_EMBEDDED_CC = re.compile(r"\n([.'])")
_NEEDS_QUOTING = re.compile(r"\s")


def starts_with_control_char(line: str) -> bool:
    """Does the line start with the control character?"""
    return line.startswith(CONTROL_CHAR)


def escape_embedded_control_chars(text: str) -> str:
    """Prevent periods or apostrophes after a newline from starting a control line.

    Idempotent: the escape inserted after the newline is not itself a
    control character.
    """
    return _EMBEDDED_CC.sub(lambda m: "\n" + ZERO_WIDTH + m.group(1), text)


def escape_backslashes(text: str) -> str:
    """Render backslashes literally so no escape sequence leaks through."""
    return text.replace("\\", "\\e")


def escape_hyphens(text: str) -> str:
    """Turn hyphens into minus signs, as expected for options and names."""
    return text.replace("-", "\\-")


def quote_argument(arg: str) -> str:
    """Quote a control line argument if it is empty or contains whitespace.

    Embedded double quotes are written as the ``\\(dq`` glyph.
    """
    if arg and not _NEEDS_QUOTING.search(arg):
        return arg
    return '"' + arg.replace('"', "\\(dq") + '"'
