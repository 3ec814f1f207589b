"""
Failure types for dose_sweep.

Every error is raised at the layer that detects it and propagates unchanged
to the command-line entry point, which reports it and exits.
"""
from typing import Optional


class DoseSweepError(Exception):
    """Base class for all dose_sweep failures."""
    pass


class TableFormatError(DoseSweepError, ValueError):
    """Raised when the parameter table violates the input format.

    Attributes:
        line_number: 1-based line number in the input (header is line 1)
        column: Header name of the offending column, if known
    """

    def __init__(self, message: str, line_number: Optional[int] = None, column: Optional[str] = None):
        self.line_number = line_number
        self.column = column
        location = []
        if line_number is not None:
            location.append(f"line {line_number}")
        if column is not None:
            location.append(f"column '{column}'")
        if location:
            message = f"{', '.join(location)}: {message}"
        super().__init__(message)


class HeaderMismatchError(TableFormatError):
    pass


class FieldCountError(TableFormatError):
    pass


class FieldTooLongError(TableFormatError):
    pass


class InvalidCharacterError(TableFormatError):
    """A numeric column contains a character outside [0-9.eE-]."""

    def __init__(self, character: str, line_number: Optional[int] = None, column: Optional[str] = None):
        self.character = character
        super().__init__(
            f"numerical data column value contains invalid character {character!r}",
            line_number=line_number,
            column=column,
        )


class LineTooLongError(TableFormatError):
    pass


class UnterminatedLineError(TableFormatError):
    pass


class NullByteError(TableFormatError):
    pass


class InvalidNumberError(TableFormatError):
    """Only raised when strict number decoding is enabled."""
    pass


class SampleCapacityError(DoseSweepError):
    """Raised when a table already holds its maximum number of samples."""
    pass


class TableIOError(DoseSweepError, OSError):
    """Raised when an input or output file cannot be opened, read, or written."""
    pass


class SweepError(DoseSweepError, ValueError):
    """Raised for sweep bounds that cannot produce a terminating sweep."""
    pass


class ConfigError(DoseSweepError, ValueError):
    """Raised for settings that are malformed or out of range."""
    pass
