"""Exceptions related to character streams.

This module provides custom exceptions for errors that occur while opening
or reading the character sources consumed by the statistics service.
"""


class StreamError(Exception):
    """Base exception for all stream-related errors."""

    pass


class StreamOpenError(StreamError):
    """Exception raised when a stream's underlying source cannot be opened."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        *args: object,
        **kwargs: object,
    ) -> None:
        """Initialize the exception with context information.

        Args:
            message: The error message
            file_path: Path to the file that caused the error
            *args: Additional positional arguments passed to parent class
            **kwargs: Additional keyword arguments passed to parent class
        """
        self.file_path = file_path
        self.message = f"{message}" + (f" File: {file_path}" if file_path else "")
        super().__init__(self.message, *args, **kwargs)


class StreamReadError(StreamError):
    """Exception raised when reading or decoding from a stream fails."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        *args: object,
        **kwargs: object,
    ) -> None:
        """Initialize the exception with context information.

        Args:
            message: The error message
            file_path: Path to the file that caused the error
            *args: Additional positional arguments passed to parent class
            **kwargs: Additional keyword arguments passed to parent class
        """
        self.file_path = file_path
        self.message = f"{message}" + (f" File: {file_path}" if file_path else "")
        super().__init__(self.message, *args, **kwargs)


class EndOfStreamError(StreamError):
    """Exception raised when a character is requested at end-of-stream."""

    pass
