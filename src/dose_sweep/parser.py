"""
Strict parser for the sample parameter table.

The input is a tab-separated file whose first line must be exactly
``name<TAB>ymin<TAB>ymax<TAB>EC50``. Every following non-blank line holds
one sample. Any format violation raises a TableFormatError; nothing is
returned for a partially valid file.
"""
import logging
import re
from typing import BinaryIO, List, Optional

from .config import defaults
from .config.settings import SweepSettings
from .errors import (
    FieldCountError,
    FieldTooLongError,
    HeaderMismatchError,
    InvalidCharacterError,
    InvalidNumberError,
    TableIOError,
)
from .samples import SampleRecord, SampleTable
from .tokenizer import is_blank, read_lines, split_fields

logger = logging.getLogger(__name__)

NAME_COL = 0
YMIN_COL = 1
YMAX_COL = 2
EC50_COL = 3

NUMERIC_CHARACTERS = frozenset("0123456789.-eE")

# Longest prefix strtod() would consume from a field that passed the character check
_NUMBER_PREFIX = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE]-?\d+)?")


def _check_field_length(field: str, index: int, line_number: int, max_field_bytes: int) -> None:
    if len(field) > max_field_bytes:
        raise FieldTooLongError(
            f"field is {len(field)} bytes; the maximum is {max_field_bytes}",
            line_number=line_number,
            column=defaults.EXPECTED_HEADER[index] if index < len(defaults.EXPECTED_HEADER) else None,
        )


def validate_header(fields: List[str], line_number: int = 1,
                    max_field_bytes: int = defaults.DEFAULT_MAX_FIELD_BYTES) -> None:
    """
    Check a split header line against the expected column names.

    Comparison is exact: case-sensitive, no trimming, same order.

    Raises:
        FieldTooLongError: A header field exceeds max_field_bytes
        HeaderMismatchError: A name differs, or a column is missing or extra
    """
    expected = defaults.EXPECTED_HEADER
    for index, (found, wanted) in enumerate(zip(fields, expected)):
        _check_field_length(found, index, line_number, max_field_bytes)
        if found != wanted:
            raise HeaderMismatchError(
                f"column header {found!r} doesn't match expected header {wanted!r}",
                line_number=line_number,
            )

    if len(fields) != len(expected):
        raise HeaderMismatchError(
            f"header has {len(fields)} fields; the expected fields are: {', '.join(expected)}",
            line_number=line_number,
        )


def decode_number(text: str, line_number: Optional[int] = None, column: Optional[str] = None,
                  strict: bool = defaults.DEFAULT_STRICT_NUMBERS) -> float:
    """
    Decode a numeric field that already passed the character check.

    Follows C strtod(): the longest valid leading number is used and the rest
    of the field is ignored; a field with no valid leading number is 0.0.
    In strict mode anything short of a complete number is an error.
    """
    match = _NUMBER_PREFIX.match(text)
    prefix = match.group(0) if match else ""

    if prefix and prefix == text:
        return float(text)

    if strict:
        raise InvalidNumberError(
            f"{text!r} is not a valid number", line_number=line_number, column=column
        )

    value = float(prefix) if prefix else 0.0
    logger.warning(
        f"line {line_number}, column '{column}': {text!r} is not a complete number; using {value!r}"
    )
    return value


def parse_record(fields: List[str], line_number: int,
                 settings: Optional[SweepSettings] = None) -> SampleRecord:
    """
    Build a SampleRecord from the split fields of one data line.

    Fields are checked left to right, so the first problem on the line is
    the one reported.

    Raises:
        FieldTooLongError: A field exceeds the configured byte limit
        InvalidCharacterError: A numeric field has a character outside [0-9.eE-]
        FieldCountError: The line does not have exactly four fields
        InvalidNumberError: Strict mode only, see decode_number()
    """
    settings = settings or SweepSettings()
    expected = defaults.EXPECTED_HEADER

    for index, field in enumerate(fields[:len(expected)]):
        _check_field_length(field, index, line_number, settings.max_field_bytes)
        if index == NAME_COL:
            continue
        for character in field:
            if character not in NUMERIC_CHARACTERS:
                raise InvalidCharacterError(character, line_number=line_number, column=expected[index])

    if len(fields) != len(expected):
        raise FieldCountError(
            f"data line has {len(fields)} fields; the expected fields are: {', '.join(expected)}",
            line_number=line_number,
        )

    ymin, ymax, ec50 = (
        decode_number(fields[col], line_number, expected[col], settings.strict_numbers)
        for col in (YMIN_COL, YMAX_COL, EC50_COL)
    )
    return SampleRecord(name=fields[NAME_COL], ymin=ymin, ymax=ymax, ec50=ec50)


def parse_table(stream: BinaryIO, settings: Optional[SweepSettings] = None) -> SampleTable:
    """
    Parse a complete parameter table from a binary stream.

    Args:
        stream: Binary stream holding the table
        settings: Limits and decoding mode (defaults if omitted)

    Returns:
        SampleTable with one record per data line, in file order

    Raises:
        TableFormatError: Any violation of the input format
        SampleCapacityError: More data lines than settings.max_samples
    """
    settings = settings or SweepSettings()
    lines = read_lines(stream, settings.max_line_bytes)

    first = next(lines, None)
    if first is None:
        raise HeaderMismatchError(
            f"input is empty; expected header: {', '.join(defaults.EXPECTED_HEADER)}",
            line_number=1,
        )
    header_number, header_line = first
    validate_header(split_fields(header_line, header_number), header_number, settings.max_field_bytes)

    table = SampleTable(capacity=settings.max_samples)
    for line_number, line in lines:
        if is_blank(line):
            logger.debug(f"Skipping blank line {line_number}")
            continue
        record = parse_record(split_fields(line, line_number), line_number, settings)
        table.append(record)

    logger.info(f"Parsed {len(table)} samples")
    return table


def parse_table_file(path, settings: Optional[SweepSettings] = None) -> SampleTable:
    """Open ``path`` and parse it with parse_table()."""
    try:
        with open(path, "rb") as stream:
            return parse_table(stream, settings)
    except TableIOError:
        raise
    except OSError as exc:
        raise TableIOError(f"could not read input file {path}: {exc}") from exc
