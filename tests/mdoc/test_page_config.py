"""Tests for page file loading."""

from pathlib import Path

import pytest

from mdoc import PageConfigError, PageNotFoundError
from mdoc.config import ControlEntry, PageConfig, TextEntry, load_page


class TestLoadPage:
    def test_load_page(self, page_file: Path) -> None:
        page = load_page(page_file)
        assert page.name == "foo"
        assert page.title.section == "1"
        assert page.date is not None and page.date.year == "2024"
        assert page.os is not None and page.os.version == "6.1"
        assert [s.heading for s in page.sections] == ["synopsis", "description"]

    def test_line_entries(self, page_file: Path) -> None:
        lines = load_page(page_file).sections[1].lines
        assert lines[0] == "The foo-bar utility."
        assert isinstance(lines[1], TextEntry)
        assert isinstance(lines[2], ControlEntry)
        assert lines[2].args == ["mandoc", "1"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(PageNotFoundError) as exc_info:
            load_page(tmp_path / "missing.yaml")
        assert "missing.yaml" in exc_info.value.path

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("title: [unclosed\n")
        with pytest.raises(PageConfigError, match="invalid YAML"):
            load_page(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(PageConfigError, match="mapping"):
            load_page(path)

    def test_missing_required_field(self, tmp_path: Path) -> None:
        path = tmp_path / "page.yaml"
        path.write_text("name: foo\ndescription: bar\n")
        with pytest.raises(PageConfigError) as exc_info:
            load_page(path)
        assert "title" in exc_info.value.reason


class TestToDocument:
    def test_render(self, page_file: Path) -> None:
        text = load_page(page_file).to_document().render()
        assert text == (
            ".Dd January 5 2024\n"
            ".Dt FOO 1\n"
            ".Os Linux 6.1\n"
            ".Sh NAME\n"
            ".Nm foo\n"
            ".Nd do a foo thing\n"
            ".Sh SYNOPSIS\n"
            ".Nm\n"
            ".Op Fl v\n"
            ".Sh DESCRIPTION\n"
            "The foo\\-bar utility.\n"
            "See \\fBbar\\fR\n"
            ".br\n"
            "\\fImore\\fR\n"
            ".Xr mandoc 1\n"
        )

    def test_control_arguments_quoted(self) -> None:
        page = PageConfig.model_validate(
            {
                "title": {"title": "FOO", "section": "1"},
                "name": "foo",
                "description": "d",
                "sections": [{"heading": "x", "lines": [{"control": "Ar", "args": ["two words"]}]}],
            }
        )
        assert page.to_document().render().endswith('.Sh X\n.Ar "two words"\n')
