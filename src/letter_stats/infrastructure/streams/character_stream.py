"""Character stream implementations.

This module defines the sequential, resettable character source consumed by
the statistics service, together with in-memory and file-backed
implementations of it.
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from typing import IO, Protocol, runtime_checkable

from ..exceptions.stream_exceptions import (
    EndOfStreamError,
    StreamOpenError,
    StreamReadError,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class CharacterStream(Protocol):
    """Sequential source of characters that can be rewound to its start."""

    def reset_position_to_start(self) -> None:
        """Move the read cursor back to the first character."""
        ...

    @property
    def is_eof(self) -> bool:
        """Whether no further characters remain."""
        ...

    def read_next_char(self) -> str:
        """Return the next character and advance the cursor."""
        ...


def iter_chars(stream: CharacterStream) -> Iterator[str]:
    """Lazily yield the remaining characters of a stream.

    Args:
        stream: The stream to read from its current position

    Returns
    -------
        Iterator over characters, stopping at end-of-stream
    """
    while not stream.is_eof:
        yield stream.read_next_char()


class StringCharacterStream:
    """Character stream over an in-memory string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0

    def reset_position_to_start(self) -> None:
        self._position = 0

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._text)

    def read_next_char(self) -> str:
        if self.is_eof:
            raise EndOfStreamError("Cannot read past the end of the stream")
        char = self._text[self._position]
        self._position += 1
        return char


class FileCharacterStream:
    """Character stream reading a text file one character at a time.

    The file is opened lazily on first use and kept open until ``close`` is
    called or the context manager exits. Only one character of look-ahead is
    buffered, so memory use does not depend on the file size.

    Attributes
    ----------
        file_path: Path of the file being read
        encoding: Text encoding used to decode the file
    """

    def __init__(self, file_path: str | Path, encoding: str = "utf-8") -> None:
        """Initialize the stream.

        Args:
            file_path: Path to the text file to read
            encoding: Text encoding of the file (default: utf-8)
        """
        self.file_path = Path(file_path)
        self.encoding = encoding
        self._handle: IO[str] | None = None
        self._lookahead = ""

    def _ensure_open(self) -> IO[str]:
        if self._handle is None:
            try:
                self._handle = open(self.file_path, encoding=self.encoding)
            except Exception as e:
                raise StreamOpenError(
                    f"Failed to open file: {e}", file_path=str(self.file_path)
                ) from e
            logger.debug(f"Opened {self.file_path} with encoding {self.encoding}")
            self._lookahead = self._read_one()
        return self._handle

    def _read_one(self) -> str:
        assert self._handle is not None
        try:
            return self._handle.read(1)
        except UnicodeDecodeError as e:
            raise StreamReadError(
                f"Failed to decode file: {e}", file_path=str(self.file_path)
            ) from e
        except OSError as e:
            raise StreamReadError(
                f"Failed to read file: {e}", file_path=str(self.file_path)
            ) from e

    def reset_position_to_start(self) -> None:
        handle = self._ensure_open()
        handle.seek(0)
        self._lookahead = self._read_one()

    @property
    def is_eof(self) -> bool:
        self._ensure_open()
        return self._lookahead == ""

    def read_next_char(self) -> str:
        if self.is_eof:
            raise EndOfStreamError(
                f"Cannot read past the end of the stream for {self.file_path}"
            )
        char = self._lookahead
        self._lookahead = self._read_one()
        return char

    def close(self) -> None:
        """Close the underlying file if it is open."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            self._lookahead = ""

    def __enter__(self) -> "FileCharacterStream":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
