"""Page files: YAML descriptions of a manual page.

Example page file:

    title:
      title: FOO
      section: "1"
    name: foo
    description: do a foo thing
    os:
      system: Linux
    sections:
      - heading: synopsis
        lines:
          - control: Nm
          - control: Op
            args: [Fl, v]
      - heading: description
        lines:
          - The foo utility does a foo thing.
          - text:
              - See
              - {kind: bold, text: bar}
              - {kind: line_break}
              - for more.
"""

import logging
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mdoc.document import Document, DocumentDate, DocumentTitle, OperatingSystem
from mdoc.exceptions import PageConfigError, PageNotFoundError
from mdoc.inline import Bold, Italic, LineBreak, Roman

logger = logging.getLogger(__name__)


class ControlEntry(BaseModel):
    """A control line; arguments are quoted as needed."""

    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    control: str
    args: list[str] = Field(default_factory=list)


class TextEntry(BaseModel):
    """A text line made of inline elements (plain strings are roman)."""

    model_config = ConfigDict(extra="forbid")

    text: list[Union[str, Roman, Italic, Bold, LineBreak]]


PageLine = Union[str, ControlEntry, TextEntry]


class SectionConfig(BaseModel):
    heading: str
    lines: list[PageLine] = Field(default_factory=list)


class PageConfig(BaseModel):
    """Complete description of a manual page."""

    title: DocumentTitle
    name: str
    description: str
    date: DocumentDate | None = None
    os: OperatingSystem | None = None
    sections: list[SectionConfig] = Field(default_factory=list)

    def to_document(self) -> Document:
        doc = Document(
            self.title,
            name=self.name,
            description=self.description,
            date=self.date,
            os=self.os,
        )
        for section in self.sections:
            doc.add_section(section.heading)
            for entry in section.lines:
                if isinstance(entry, ControlEntry):
                    doc.control(entry.control, entry.args)
                elif isinstance(entry, TextEntry):
                    doc.text(entry.text)
                else:
                    doc.text([entry])
        return doc


def load_page(path: Path) -> PageConfig:
    """Load a page file.

    Args:
        path: Path to a YAML page file

    Returns:
        Validated PageConfig

    Raises:
        PageNotFoundError: If the file does not exist
        PageConfigError: If the file is not valid YAML or not a page
    """
    path = Path(path)
    if not path.exists():
        raise PageNotFoundError(str(path))

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise PageConfigError(str(path), f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise PageConfigError(str(path), "expected a mapping at the top level")

    try:
        page = PageConfig.model_validate(data)
    except ValidationError as e:
        raise PageConfigError(str(path), str(e)) from e

    logger.debug("Loaded page %s from %s", page.name, path)
    return page
