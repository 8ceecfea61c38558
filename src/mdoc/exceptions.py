"""mdoc exception hierarchy.

The document model and renderer never raise these: content is escaped
or passed through, and errors from an output sink propagate unchanged.
They cover page files, adapters and the CLI.

Usage:
    from mdoc.exceptions import PageNotFoundError, MdocError

    try:
        page = load_page(path)
    except PageNotFoundError as e:
        print(f"No page file at {e.path}")
    except MdocError as e:
        print(f"mdoc error: {e}")
"""


class MdocError(Exception):
    """Base exception for all mdoc errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# Configuration Errors


class ConfigurationError(MdocError):
    """Error in mdoc configuration or page files."""

    pass


class PageNotFoundError(ConfigurationError):
    """Page file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Page file not found: {path}")


class PageConfigError(ConfigurationError):
    """Page file is not valid YAML or doesn't describe a page."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid page file '{path}': {reason}")


class PageExistsError(ConfigurationError):
    """Refusing to overwrite an existing page file."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Page file already exists: {path}")


# Adapter Errors


class AdapterError(MdocError):
    """A command schema can't be turned into a document."""

    pass
