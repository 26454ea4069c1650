"""
Decimal text parsing for fixed-width unsigned integers.

Pure text handling with no dependency on the index types. Accepts the
grammar [0-9]+ only: no sign, no surrounding whitespace, no separators.
Leading zeros are allowed.
"""

from ..errors import IntErrorKind, ParseIntError

_DIGITS = '0123456789'


def parse_unsigned(text: str, bits: int) -> int:
    """
    Parse unsigned decimal text that must fit in the given width.

    Digits are consumed left to right and the first problem wins, so
    "2560x" overflows a u8 before the invalid character is reached.

    Args:
        text (str): Text to parse
        bits (int): Width of the target unsigned type

    Returns:
        int: Parsed value in [0, 2**bits - 1]

    Raises:
        TypeError: If text is not a str
        ParseIntError: EMPTY, INVALID_DIGIT or POS_OVERFLOW

    Example:
        >>> parse_unsigned("0042", 8)
        42
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if not text:
        raise ParseIntError(IntErrorKind.EMPTY, text)

    limit = (1 << bits) - 1
    result = 0
    for char in text:
        digit = _DIGITS.find(char)
        if digit < 0:
            raise ParseIntError(IntErrorKind.INVALID_DIGIT, text)
        result = result * 10 + digit
        if result > limit:
            raise ParseIntError(IntErrorKind.POS_OVERFLOW, text)
    return result


def parse_nonzero(text: str, bits: int) -> int:
    """
    Parse unsigned decimal text that must also be non-zero.

    Args:
        text (str): Text to parse
        bits (int): Width of the target unsigned type

    Returns:
        int: Parsed value in [1, 2**bits - 1]

    Raises:
        ParseIntError: Any parse_unsigned failure, or ZERO
    """
    value = parse_unsigned(text, bits)
    if value == 0:
        raise ParseIntError(IntErrorKind.ZERO, text)
    return value
