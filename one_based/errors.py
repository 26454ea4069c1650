"""
Error types shared by every index width.

Three exception classes cover every failure in this package:

- OneBasedError: a plain integer cannot be used in the requested convention
  (zero as a 1-based index, or MAX as a 0-based index).
- ParseIntError: text is not a valid non-zero unsigned decimal.
- TryFromIntError: a value does not fit in the target width.

All of them are ValueError subclasses.
"""

from enum import Enum
from typing import Optional


class OneBasedErrorKind(Enum):
    """Reasons a plain integer is rejected as an index."""
    ZERO_INDEX = "zero_index"          # 0 given as a 1-based index
    OVERFLOW_INDEX = "overflow_index"  # MAX given as a 0-based index


class IntErrorKind(Enum):
    """Reasons decimal text is rejected by the parser."""
    EMPTY = "empty"
    INVALID_DIGIT = "invalid_digit"
    POS_OVERFLOW = "pos_overflow"
    NEG_OVERFLOW = "neg_overflow"  # only reachable for signed targets
    ZERO = "zero"


_PARSE_MESSAGES = {
    IntErrorKind.EMPTY: "cannot parse integer from empty string",
    IntErrorKind.INVALID_DIGIT: "invalid digit found in string",
    IntErrorKind.POS_OVERFLOW: "number too large to fit in target type",
    IntErrorKind.NEG_OVERFLOW: "number too small to fit in target type",
    IntErrorKind.ZERO: "number would be zero for non-zero type",
}


class OneBasedError(ValueError):
    """
    Raised when an integer cannot be converted into a 1-based index.

    Attributes:
        kind (OneBasedErrorKind): Which convention was violated
        type_name (Optional[str]): Unsigned type the value was meant for,
            e.g. 'u8'
    """

    def __init__(self, kind: OneBasedErrorKind, type_name: Optional[str] = None):
        self.kind = kind
        self.type_name = type_name
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.kind is OneBasedErrorKind.ZERO_INDEX:
            return "0 passed as 1-based index"
        return f"{self.type_name or 'unsigned'}::MAX cannot be used as 0-based index"

    @classmethod
    def zero_index(cls, type_name: Optional[str] = None) -> 'OneBasedError':
        """Build the error raised for a zero 1-based index."""
        return cls(OneBasedErrorKind.ZERO_INDEX, type_name)

    @classmethod
    def overflow_index(cls, type_name: Optional[str] = None) -> 'OneBasedError':
        """Build the error raised for a MAX 0-based index."""
        return cls(OneBasedErrorKind.OVERFLOW_INDEX, type_name)

    def __eq__(self, other):
        if not isinstance(other, OneBasedError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self):
        return hash(self.kind)

    def __reduce__(self):
        return (self.__class__, (self.kind, self.type_name))


class ParseIntError(ValueError):
    """
    Raised when text cannot be parsed into an index.

    Mirrors the taxonomy of the standard integer parser. A literal zero is
    reported here with kind ZERO rather than as OneBasedError, so callers
    can tell a parse-time zero from a construct-time one.

    Attributes:
        kind (IntErrorKind): Classification of the failure
        text (Optional[str]): The rejected input
    """

    def __init__(self, kind: IntErrorKind, text: Optional[str] = None):
        self.kind = kind
        self.text = text
        super().__init__(_PARSE_MESSAGES[kind])

    def __eq__(self, other):
        if not isinstance(other, ParseIntError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self):
        return hash(self.kind)

    def __reduce__(self):
        return (self.__class__, (self.kind, self.text))


class TryFromIntError(ValueError):
    """
    Raised when a value does not fit in the target unsigned width.

    Attributes:
        value (int): The value that failed to convert
        target (Optional[str]): Name of the type that could not hold it
    """

    def __init__(self, value: int, target: Optional[str] = None):
        self.value = value
        self.target = target
        super().__init__("out of range integral type conversion attempted")

    def __str__(self) -> str:
        base = super().__str__()
        if self.target:
            return f"{base}: {self.value} does not fit in {self.target}"
        return base

    def __eq__(self, other):
        if not isinstance(other, TryFromIntError):
            return NotImplemented
        return True

    def __hash__(self):
        return hash(TryFromIntError)

    def __reduce__(self):
        return (self.__class__, (self.value, self.target))
