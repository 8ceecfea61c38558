"""Shared pytest fixtures for mdoc tests."""

from pathlib import Path

import pytest
import yaml

from mdoc import Document, DocumentTitle, Fragment


@pytest.fixture
def title() -> DocumentTitle:
    return DocumentTitle(title="FOO", section="1")


@pytest.fixture
def doc(title: DocumentTitle) -> Document:
    """A document with nothing but its header."""
    return Document(title, name="foo", description="do a foo thing")


@pytest.fixture
def fragment() -> Fragment:
    """An empty header-less fragment, for rendering single lines."""
    return Fragment()


@pytest.fixture
def page_data() -> dict:
    """Data of a small but complete page file."""
    return {
        "title": {"title": "FOO", "section": 1},
        "name": "foo",
        "description": "do a foo thing",
        "date": {"month": "January", "day": 5, "year": 2024},
        "os": {"system": "Linux", "version": "6.1"},
        "sections": [
            {
                "heading": "synopsis",
                "lines": [
                    {"control": "Nm"},
                    {"control": "Op", "args": ["Fl", "v"]},
                ],
            },
            {
                "heading": "description",
                "lines": [
                    "The foo-bar utility.",
                    {
                        "text": [
                            "See ",
                            {"kind": "bold", "text": "bar"},
                            {"kind": "line_break"},
                            {"kind": "italic", "text": "more"},
                        ]
                    },
                    {"control": "Xr", "args": ["mandoc", 1]},
                ],
            },
        ],
    }


@pytest.fixture
def page_file(tmp_path: Path, page_data: dict) -> Path:
    """Page file on disk holding ``page_data``."""
    path = tmp_path / "foo.1.yaml"
    with open(path, "w") as f:
        yaml.dump(page_data, f)
    return path
