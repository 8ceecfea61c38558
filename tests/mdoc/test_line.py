"""Tests for line rendering."""

import io

import pytest
from pydantic import ValidationError

from mdoc import (
    NAME_LINE,
    ControlLine,
    Fragment,
    LineBreak,
    TextLine,
    bold,
    control_line,
    cross_reference,
    italic,
    line_break,
    render_line,
    roman,
    text_line,
)


def render_text(*inlines) -> str:
    return Fragment().text(inlines).to_mdoc()


class TestTextLine:
    def test_render_roman(self) -> None:
        assert render_text(roman("foo")) == "foo\n"

    def test_render_dash(self) -> None:
        assert render_text(roman("foo-bar")) == "foo\\-bar\n"

    def test_render_italic(self) -> None:
        assert render_text(italic("foo")) == "\\fIfoo\\fR\n"

    def test_render_bold(self) -> None:
        assert render_text(bold("foo")) == "\\fBfoo\\fR\n"

    def test_render_mixed(self) -> None:
        text = render_text(roman("The "), bold("foo"), roman(" utility."))
        assert text == "The \\fBfoo\\fR utility.\n"

    def test_render_text_with_leading_period(self) -> None:
        assert render_text(roman(".roman")) == "\\&.roman\n"

    def test_render_text_with_leading_apostrophe(self) -> None:
        assert render_text(roman("'tis")) == "\\&'tis\n"

    def test_period_not_at_line_start(self) -> None:
        assert render_text(roman("foo "), roman(".bar")) == "foo .bar\n"

    def test_period_after_empty_fragment(self) -> None:
        """Empty text emits nothing, so the next fragment still starts the line."""
        assert render_text(roman(""), roman(".bar")) == "\\&.bar\n"

    def test_render_text_with_newline_period(self) -> None:
        assert render_text(roman("foo\n.roman")) == "foo\n\\&.roman\n"

    def test_fragment_after_trailing_newline(self) -> None:
        assert render_text(roman("foo\n"), roman(".bar")) == "foo\n\\&.bar\n"

    def test_italic_newline_period(self) -> None:
        assert render_text(italic("a\n.b")) == "\\fIa\n\\&.b\\fR\n"

    def test_backslashes_are_literal(self) -> None:
        assert render_text(roman("C:\\fBin")) == "C:\\efBin\n"
        assert render_text(bold("\\n")) == "\\fB\\en\\fR\n"

    def test_non_ascii(self) -> None:
        assert render_text(roman("naïve café")) == "naïve café\n"

    def test_empty_line(self) -> None:
        assert render_text() == "\n"
        assert Fragment().text([roman("")]).to_mdoc() == "\n"


class TestLineBreak:
    def test_render_line_break(self) -> None:
        text = render_text(roman("roman"), LineBreak(), roman("more"))
        assert text == "roman\n.br\nmore\n"

    def test_leading_line_break(self) -> None:
        assert render_text(line_break(), roman("more")) == ".br\nmore\n"

    def test_consecutive_line_breaks(self) -> None:
        text = render_text(roman("a"), line_break(), line_break(), roman("b"))
        assert text == "a\n.br\n.br\nb\n"

    def test_trailing_line_break(self) -> None:
        assert render_text(roman("a"), line_break()) == "a\n.br\n"

    def test_empty_fragment_after_trailing_line_break(self) -> None:
        text = render_text(roman("a"), line_break(), roman(""))
        assert text == render_text(roman("a"), line_break()) == "a\n.br\n"

    def test_period_after_line_break(self) -> None:
        text = render_text(roman("a"), line_break(), roman(".b"))
        assert text == "a\n.br\n\\&.b\n"


class TestControlLine:
    def test_render_control(self) -> None:
        assert control_line("foo", ["bar", "baz"]).to_mdoc() == ".foo bar baz\n"

    def test_arguments_are_verbatim(self) -> None:
        """Quoting is the job of the caller or of Fragment.control."""
        assert control_line("foo", ["foo and bar"]).to_mdoc() == ".foo foo and bar\n"

    def test_no_arguments(self) -> None:
        assert control_line("Nm").to_mdoc() == ".Nm\n"
        assert NAME_LINE.to_mdoc() == ".Nm\n"

    def test_cross_reference(self) -> None:
        assert cross_reference("mandoc", "1").to_mdoc() == ".Xr mandoc 1\n"


class TestLineModel:
    def test_lines_are_immutable(self) -> None:
        line = control_line("Sh", ["NAME"])
        with pytest.raises(ValidationError):
            line.name = "Ss"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert text_line([roman("a")]) == TextLine(inlines=(roman("a"),))
        assert control_line("Nm") == ControlLine(name="Nm")

    def test_render_to_sink(self) -> None:
        buf = io.StringIO()
        render_line(text_line([roman("a")]), buf)
        control_line("Pp").render(buf)
        assert buf.getvalue() == "a\n.Pp\n"

    def test_render_rejects_other_values(self) -> None:
        with pytest.raises(TypeError):
            render_line("not a line", io.StringIO())  # type: ignore[arg-type]

    def test_validates_from_dict(self) -> None:
        line = TextLine.model_validate({"inlines": [{"kind": "bold", "text": "x"}]})
        assert line == text_line([bold("x")])
