"""Exceptions related to statistics computation.

This module provides custom exceptions for errors raised by the statistics
service when it is called with invalid input.
"""


class LetterStatsError(Exception):
    """Base exception for all statistics-related errors."""

    pass


class InvalidArgumentError(LetterStatsError, ValueError):
    """Exception raised when a required argument is missing or invalid."""

    def __init__(
        self,
        message: str,
        argument_name: str | None = None,
        *args: object,
        **kwargs: object,
    ) -> None:
        """Initialize the exception with context information.

        Args:
            message: The error message
            argument_name: Name of the offending argument
            *args: Additional positional arguments passed to parent class
            **kwargs: Additional keyword arguments passed to parent class
        """
        self.argument_name = argument_name
        self.message = f"{message}" + (
            f" Argument: {argument_name}" if argument_name else ""
        )
        super().__init__(self.message, *args, **kwargs)
