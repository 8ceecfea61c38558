"""Init command implementation."""

from pathlib import Path

from mdoc.display import print_error, print_page_created
from mdoc.exceptions import MdocError
from mdoc.scaffold import init_page


def init_command(
    name: str,
    section: str = "1",
    description: str | None = None,
    output: Path | None = None,
) -> None:
    """Write a starter page file for ``name``.

    This function contains the business logic for the init command.
    """
    path = output or Path(f"{name}.{section}.yaml")
    try:
        init_page(path, name, section, description or "")
    except MdocError as e:
        print_error(e.message)
        raise SystemExit(1) from None
    except OSError as e:
        print_error(f"Failed to write {path}: {e}")
        raise SystemExit(1) from None
    print_page_created(path, name)
