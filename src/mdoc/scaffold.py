"""Starter page files."""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from mdoc.exceptions import PageExistsError

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _get_environment() -> Environment:
    """Get Jinja2 environment configured for page templates."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        keep_trailing_newline=True,
        trim_blocks=False,
        lstrip_blocks=False,
    )


def render_page_template(name: str, section: str = "1", description: str = "", **context: Any) -> str:
    """Render a starter page file.

    Args:
        name: Program name
        section: Manual section
        description: One-line description
        **context: Extra template variables

    Returns:
        YAML page file content
    """
    env = _get_environment()
    template = env.get_template("page.yaml.j2")
    return template.render(  # type: ignore[no-any-return]
        name=name,
        section=section,
        description=description or f"{name} utility",
        filename=context.pop("filename", f"{name}.{section}.yaml"),
        **context,
    )


def init_page(path: Path, name: str, section: str = "1", description: str = "") -> Path:
    """Write a starter page file to ``path``, which must not exist yet."""
    path = Path(path)
    if path.exists():
        raise PageExistsError(str(path))
    path.write_text(
        render_page_template(name, section, description, filename=path.name), encoding="utf-8"
    )
    return path
