"""Test the line number helpers."""

import pytest

from one_based import OneBasedError, OneBasedErrorKind, OneBasedUsize, TryFromIntError
from one_based.line_numbers import (
    LineNumber,
    to_external,
    to_internal,
    validate_external,
    validate_internal,
)


def test_line_number_is_usize_index():
    """LineNumber is the word-size index type."""
    assert LineNumber is OneBasedUsize


def test_to_internal():
    """External line 1 is list index 0."""
    assert to_internal(1) == 0
    assert to_internal(42) == 41


def test_to_internal_rejects_line_zero():
    """There is no line 0."""
    with pytest.raises(OneBasedError) as exc_info:
        to_internal(0)
    assert exc_info.value.kind is OneBasedErrorKind.ZERO_INDEX


def test_to_external():
    """List index 0 is external line 1."""
    assert to_external(0) == 1
    assert to_external(41) == 42

    with pytest.raises(TryFromIntError):
        to_external(-1)


def test_round_trip_over_a_file():
    """Converting every line of a file both ways is the identity."""
    lines = "first\nsecond\nthird".split("\n")
    for index, text in enumerate(lines):
        external = to_external(index)
        assert lines[to_internal(external)] == text
        assert lines[LineNumber.from_one_based(external).as_zero_based()] == text


def test_validate_external():
    """External line numbers are valid in [1, total_lines]."""
    assert validate_external(1, 100)
    assert validate_external(100, 100)
    assert not validate_external(0, 100)
    assert not validate_external(101, 100)
    assert validate_external(LineNumber.from_one_based(100), 100)
    assert not validate_external(LineNumber.from_zero_based(100), 100)


def test_validate_internal():
    """Internal indices are valid in [0, total_lines)."""
    assert validate_internal(0, 100)
    assert not validate_internal(-1, 100)
    assert not validate_internal(100, 100)
    assert validate_internal(LineNumber.from_zero_based(99), 100)
    assert not validate_internal(LineNumber.from_one_based(101), 100)


if __name__ == "__main__":
    test_line_number_is_usize_index()
    test_to_internal()
    test_to_internal_rejects_line_zero()
    test_to_external()
    test_round_trip_over_a_file()
    test_validate_external()
    test_validate_internal()
    print("[PASS] Line number helpers")
