"""Unit tests for the character stream implementations."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from letter_stats.infrastructure.exceptions.stream_exceptions import (
    EndOfStreamError,
    StreamError,
    StreamOpenError,
    StreamReadError,
)
from letter_stats.infrastructure.streams.character_stream import (
    CharacterStream,
    FileCharacterStream,
    StringCharacterStream,
    iter_chars,
)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for input files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


def write_text(path: Path, text: str, encoding: str = "utf-8") -> Path:
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)
    return path


class TestStringCharacterStream:
    """Tests for the StringCharacterStream class."""

    def test_reads_all_characters(self) -> None:
        """Test reading characters in order until end-of-stream."""
        stream = StringCharacterStream("ab c")

        chars = []
        while not stream.is_eof:
            chars.append(stream.read_next_char())

        assert chars == ["a", "b", " ", "c"]
        assert stream.is_eof

    def test_empty_string_is_eof(self) -> None:
        """Test that an empty stream starts at end-of-stream."""
        assert StringCharacterStream("").is_eof

    def test_reset_position_to_start(self) -> None:
        """Test rewinding, including repeated resets."""
        stream = StringCharacterStream("xyz")
        stream.read_next_char()
        stream.read_next_char()

        stream.reset_position_to_start()
        stream.reset_position_to_start()

        assert stream.read_next_char() == "x"

    def test_read_past_end_raises(self) -> None:
        """Test that reading at end-of-stream raises EndOfStreamError."""
        stream = StringCharacterStream("a")
        stream.read_next_char()

        with pytest.raises(EndOfStreamError):
            stream.read_next_char()

    def test_satisfies_protocol(self) -> None:
        """Test that the class satisfies the CharacterStream protocol."""
        assert isinstance(StringCharacterStream("a"), CharacterStream)


class TestIterChars:
    """Tests for the iter_chars generator."""

    def test_yields_from_current_position(self) -> None:
        """Test that iteration continues from the current cursor."""
        stream = StringCharacterStream("hello")
        stream.read_next_char()

        assert "".join(iter_chars(stream)) == "ello"
        assert stream.is_eof

    def test_is_lazy(self) -> None:
        """Test that characters are only read as the iterator advances."""
        stream = StringCharacterStream("abc")
        chars = iter_chars(stream)

        assert next(chars) == "a"
        assert not stream.is_eof
        assert stream.read_next_char() == "b"


class TestFileCharacterStream:
    """Tests for the FileCharacterStream class."""

    def test_reads_file_contents(self, temp_dir: Path) -> None:
        """Test reading a UTF-8 file with Cyrillic letters."""
        path = write_text(temp_dir / "input.txt", "Да, AA!")

        with FileCharacterStream(path) as stream:
            assert "".join(iter_chars(stream)) == "Да, AA!"
            assert stream.is_eof

    def test_reset_rereads_file(self, temp_dir: Path) -> None:
        """Test that resetting rewinds to the first character."""
        path = write_text(temp_dir / "input.txt", "abc")

        with FileCharacterStream(path) as stream:
            first_pass = "".join(iter_chars(stream))
            stream.reset_position_to_start()
            second_pass = "".join(iter_chars(stream))

        assert first_pass == second_pass == "abc"

    def test_empty_file_is_eof(self, temp_dir: Path) -> None:
        """Test that an empty file is immediately at end-of-stream."""
        path = write_text(temp_dir / "empty.txt", "")

        with FileCharacterStream(path) as stream:
            assert stream.is_eof
            with pytest.raises(EndOfStreamError):
                stream.read_next_char()

    def test_custom_encoding(self, temp_dir: Path) -> None:
        """Test reading a file in a non-default encoding."""
        path = write_text(temp_dir / "cp1251.txt", "ёжик", encoding="cp1251")

        with FileCharacterStream(path, encoding="cp1251") as stream:
            assert "".join(iter_chars(stream)) == "ёжик"

    def test_missing_file_raises_open_error(self, temp_dir: Path) -> None:
        """Test that a missing file raises StreamOpenError with its path."""
        path = temp_dir / "missing.txt"
        stream = FileCharacterStream(path)

        with pytest.raises(StreamOpenError) as excinfo:
            stream.reset_position_to_start()

        assert "Failed to open file" in str(excinfo.value)
        assert excinfo.value.file_path == str(path)
        assert isinstance(excinfo.value, StreamError)

    def test_undecodable_file_raises_read_error(self, temp_dir: Path) -> None:
        """Test that bytes invalid in the encoding raise StreamReadError."""
        path = temp_dir / "binary.txt"
        path.write_bytes(b"\xff\xfe\xfa")

        with FileCharacterStream(path) as stream:
            with pytest.raises(StreamReadError) as excinfo:
                stream.reset_position_to_start()

        assert "Failed to decode file" in str(excinfo.value)

    def test_close_is_idempotent(self, temp_dir: Path) -> None:
        """Test that closing twice is harmless and the stream can reopen."""
        path = write_text(temp_dir / "input.txt", "q")
        stream = FileCharacterStream(path)
        stream.reset_position_to_start()

        stream.close()
        stream.close()

        assert stream.read_next_char() == "q"
        stream.close()
