"""
Line number handling utilities.

Helpers for the most common 1-based quantity, the line number of a text
file, built on OneBasedUsize so that zero lines and off-by-one shifts are
caught where they happen.

Convention:
- Internal (code operations): 0-indexed (list/array indices)
- External (user-facing, storage): 1-indexed (human-readable), LineNumber
"""

from typing import Union

from .index import OneBasedUsize

# An external line number
LineNumber = OneBasedUsize


def to_internal(external: int) -> int:
    """
    Convert external (1-indexed) line number to internal (0-indexed).

    Args:
        external (int): 1-indexed line number (as shown to user)

    Returns:
        int: 0-indexed line number (for array access)

    Raises:
        OneBasedError: ZERO_INDEX if external is 0

    Example:
        >>> to_internal(1)
        0
        >>> to_internal(42)
        41
    """
    return LineNumber.from_one_based(external).as_zero_based()


def to_external(internal: int) -> int:
    """
    Convert internal (0-indexed) line number to external (1-indexed).

    Args:
        internal (int): 0-indexed line number (array index)

    Returns:
        int: 1-indexed line number (for display to user)

    Raises:
        OneBasedError: OVERFLOW_INDEX if internal is usize::MAX

    Example:
        >>> to_external(0)
        1
        >>> to_external(41)
        42
    """
    return LineNumber.from_zero_based(internal).as_one_based().get()


def validate_external(line_number: Union[int, LineNumber], total_lines: int) -> bool:
    """
    Validate that external line number is within valid range.

    Args:
        line_number (Union[int, LineNumber]): 1-indexed line number to validate
        total_lines (int): Total number of lines in file

    Returns:
        bool: True if valid, False otherwise

    Example:
        >>> validate_external(1, 100)
        True
        >>> validate_external(LineNumber.from_one_based(100), 100)
        True
        >>> validate_external(0, 100)
        False
    """
    if isinstance(line_number, LineNumber):
        line_number = line_number.as_one_based().get()
    return 1 <= line_number <= total_lines


def validate_internal(line_index: Union[int, LineNumber], total_lines: int) -> bool:
    """
    Validate that internal line index is within valid range.

    A LineNumber is accepted too and checked through its 0-based value.

    Args:
        line_index (Union[int, LineNumber]): 0-indexed line index to validate
        total_lines (int): Total number of lines in file

    Returns:
        bool: True if valid, False otherwise

    Example:
        >>> validate_internal(0, 100)
        True
        >>> validate_internal(-1, 100)
        False
        >>> validate_internal(100, 100)
        False
    """
    if isinstance(line_index, LineNumber):
        line_index = line_index.as_zero_based()
    return 0 <= line_index < total_lines
