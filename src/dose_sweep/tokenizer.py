"""
Line reader and field splitter for the tab-separated parameter table.

Lines are read from a binary stream so that length limits apply to bytes,
then decoded as Latin-1, which maps every byte to exactly one character.
"""
from typing import BinaryIO, Iterator, List, Tuple

from .config import defaults
from .errors import (
    FieldCountError,
    LineTooLongError,
    NullByteError,
    UnterminatedLineError,
)

FIELD_DELIMITER = "\t"
LINE_TERMINATOR = b"\n"
CARRIAGE_RETURN = "\r"
ENCODING = "latin-1"


def read_lines(
    stream: BinaryIO,
    max_line_bytes: int = defaults.DEFAULT_MAX_LINE_BYTES,
) -> Iterator[Tuple[int, str]]:
    """
    Yield (line_number, text) for each newline-terminated line in the stream.

    The trailing newline is removed. A read that returns no bytes ends the
    iteration; any other line that is not newline-terminated is an error.

    Args:
        stream: Binary stream positioned at the start of a line
        max_line_bytes: Maximum line length in bytes, including the newline

    Raises:
        NullByteError: Line contains a NUL byte
        LineTooLongError: Line reaches max_line_bytes without a newline
        UnterminatedLineError: Final line has content but no newline
    """
    line_number = 0
    while True:
        raw = stream.readline(max_line_bytes)
        if not raw:
            return
        line_number += 1

        if b"\x00" in raw:
            raise NullByteError("unanticipated null character", line_number=line_number)
        if not raw.endswith(LINE_TERMINATOR):
            if len(raw) >= max_line_bytes:
                raise LineTooLongError(
                    f"line exceeds the maximum length of {max_line_bytes} bytes",
                    line_number=line_number,
                )
            raise UnterminatedLineError(
                "last line in file not terminated by newline", line_number=line_number
            )

        yield line_number, raw[:-1].decode(ENCODING)


def is_blank(line: str) -> bool:
    return line == "" or line == CARRIAGE_RETURN


def split_fields(line: str, line_number: int) -> List[str]:
    """Split a line on tabs; a carriage return ends the last field."""
    body, _, trailing = line.partition(CARRIAGE_RETURN)
    if trailing:
        raise FieldCountError(
            "content follows the carriage return line terminator",
            line_number=line_number,
        )
    return body.split(FIELD_DELIMITER)
