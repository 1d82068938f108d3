"""Random-access reader over a catalog file held fully in memory."""

from pathlib import Path
from typing import Union

from textdomain.exceptions import SourceUnreadableError


class CachedFileReader:
    """Reads the whole file on construction and serves reads from memory.

    Attributes:
        path: Path of the file that was read.
    """

    def __init__(self, path: Union[str, Path]):
        """Read the file into memory.

        Args:
            path: File to read.

        Raises:
            SourceUnreadableError: If the file cannot be read.
        """
        self.path = Path(path)
        try:
            self._data = self.path.read_bytes()
        except OSError as e:
            raise SourceUnreadableError(
                f"Cannot read catalog source {self.path}: {e.strerror or e}",
                path=self.path,
            ) from e
        self._pos = 0

    @property
    def pos(self) -> int:
        return self._pos

    def length(self) -> int:
        return len(self._data)

    def read(self, size: int) -> bytes:
        """Read up to size bytes from the current position.

        Args:
            size: Maximum number of bytes to return.

        Returns:
            The bytes read; shorter than size at the end of the buffer.
        """
        chunk = self._data[self._pos : self._pos + size]
        self._pos += len(chunk)
        return chunk

    def seekto(self, pos: int) -> int:
        """Move the read position, clamped to the buffer bounds.

        Returns:
            The new position.
        """
        self._pos = max(0, min(pos, len(self._data)))
        return self._pos

    def substr(self, start: int, length: int) -> bytes:
        return self._data[start : start + length]

    def read_all(self) -> bytes:
        """Read everything from the current position to the end."""
        chunk = self._data[self._pos :]
        self._pos = len(self._data)
        return chunk

    def text(self, encoding: str = "utf-8") -> str:
        """Decode the whole buffer.

        Raises:
            SourceUnreadableError: If the content is not valid in the encoding.
        """
        try:
            return self._data.decode(encoding)
        except UnicodeDecodeError as e:
            raise SourceUnreadableError(
                f"Catalog source {self.path} is not valid {encoding}: {e}",
                path=self.path,
            ) from e
