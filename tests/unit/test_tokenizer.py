"""Tests for the bounded line reader and field splitter."""

import io

import pytest

from dose_sweep.errors import (
    FieldCountError,
    LineTooLongError,
    NullByteError,
    UnterminatedLineError,
)
from dose_sweep.tokenizer import is_blank, read_lines, split_fields


class TestReadLines:
    """Tests for read_lines()."""

    def test_lines_numbered_and_newline_removed(self):
        stream = io.BytesIO(b"a\tb\nc\td\n")
        assert list(read_lines(stream)) == [(1, "a\tb"), (2, "c\td")]

    def test_empty_input_yields_nothing(self):
        assert list(read_lines(io.BytesIO(b""))) == []

    def test_carriage_return_is_kept_for_splitter(self):
        assert list(read_lines(io.BytesIO(b"a\r\n"))) == [(1, "a\r")]

    def test_unterminated_last_line(self):
        lines = read_lines(io.BytesIO(b"a\nb"))
        assert next(lines) == (1, "a")
        with pytest.raises(UnterminatedLineError) as excinfo:
            next(lines)
        assert excinfo.value.line_number == 2

    def test_null_byte(self):
        with pytest.raises(NullByteError, match="null character"):
            list(read_lines(io.BytesIO(b"ab\x00c\n")))

    def test_line_at_limit_accepted(self):
        # 4095 bytes of content plus the newline
        content = b"x" * 4095
        assert list(read_lines(io.BytesIO(content + b"\n"))) == [(1, "x" * 4095)]

    def test_line_over_limit_rejected(self):
        content = b"x" * 4096
        with pytest.raises(LineTooLongError, match="4096"):
            list(read_lines(io.BytesIO(content + b"\n")))

    def test_custom_limit(self):
        with pytest.raises(LineTooLongError):
            list(read_lines(io.BytesIO(b"abcdef\n"), max_line_bytes=4))

    def test_bytes_decoded_one_to_one(self):
        [(_, text)] = list(read_lines(io.BytesIO(b"caf\xe9\n")))
        assert text == "café"
        assert len(text) == 4


class TestSplitFields:
    """Tests for split_fields()."""

    def test_tab_is_only_delimiter(self):
        assert split_fields("a b\tc,d\t\te", 1) == ["a b", "c,d", "", "e"]

    def test_carriage_return_ends_line(self):
        assert split_fields("a\tb\r", 1) == ["a", "b"]

    def test_content_after_carriage_return_rejected(self):
        with pytest.raises(FieldCountError) as excinfo:
            split_fields("a\rb\tc", 7)
        assert excinfo.value.line_number == 7

    def test_empty_line_is_one_empty_field(self):
        assert split_fields("", 1) == [""]


def test_is_blank():
    assert is_blank("")
    assert is_blank("\r")
    assert not is_blank(" ")
    assert not is_blank("\t")
