"""Custom exceptions for the text domain engine.

Only file-level failures are exceptions. Lookup misses, unloaded domains and
unkeyable entries are reported through return values instead.
"""

from pathlib import Path
from typing import Optional, Union


class TextDomainError(Exception):
    """Base exception for all text domain engine errors.

    Example:
        try:
            loader.load("admin", "fr-FR")
        except TextDomainError as e:
            logger.error("textdomain_error", error=str(e))
    """

    pass


class SourceUnreadableError(TextDomainError):
    """Raised when a catalog source cannot be read or parsed.

    Attributes:
        path: Path of the offending source, if known.
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class CatalogFormatError(SourceUnreadableError):
    """Raised when a source was read but does not describe a catalog.

    Example:
        >>> loader.load_file(Path("broken.en-US.yml"))
        Traceback (most recent call last):
        ...
        CatalogFormatError: Catalog 'entries' must be a list
    """

    pass
