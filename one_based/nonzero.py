"""
Positive unsigned scalars.

Python has no built-in non-zero integer, so each width gets a small value
object whose constructor is the only check: once a NonZeroU32 exists, its
value is known to be in [1, u32::MAX] and nothing downstream validates it
again.

Typical usage example:

    from one_based.nonzero import NonZeroU16
    size = NonZeroU16(512)
    size.get()           # 512
    NonZeroU16.new(0)    # None
"""

import operator
import struct
from dataclasses import dataclass
from typing import ClassVar, Optional, Type, TypeVar

from .errors import TryFromIntError
from .utils.int_parser import parse_nonzero

# Platform word size in bits (pointer width), the width of OneBasedUsize
WORD_BITS = struct.calcsize("P") * 8

N = TypeVar('N', bound='NonZero')


def unsigned_max(bits: int) -> int:
    """Largest value of an unsigned integer with the given width."""
    return (1 << bits) - 1


def require_unsigned(value, bits: int, type_name: str) -> int:
    """
    Check that value is a plain unsigned integer of the given width.

    Args:
        value: Candidate value; anything supporting __index__ except bool
        bits (int): Width of the unsigned type
        type_name (str): Type name used in error messages, e.g. 'u8'

    Returns:
        int: The value as a plain int

    Raises:
        TypeError: If value is not an integer
        TryFromIntError: If value is negative or larger than the width allows
    """
    if isinstance(value, bool):
        raise TypeError(f"{type_name} expects an int, got bool")
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(
            f"{type_name} expects an int, got {type(value).__name__}"
        ) from None
    if value < 0 or value > unsigned_max(bits):
        raise TryFromIntError(value, type_name)
    return value


@dataclass(frozen=True, order=True)
class NonZero:
    """
    Base class of the positive unsigned scalars.

    Equality and ordering only apply between scalars of the same width.

    Attributes:
        value (int): The wrapped value, always in [1, MAX]
    """
    value: int

    BITS: ClassVar[int]
    GUARANTEED_BITS: ClassVar[int]  # width promised on every platform
    PLATFORM_DEPENDENT: ClassVar[bool] = False
    TYPE_NAME: ClassVar[str]
    MIN: ClassVar['NonZero']
    MAX: ClassVar['NonZero']

    def __post_init__(self):
        if type(self) is NonZero:
            raise TypeError("NonZero is abstract; use a width such as NonZeroU32")
        value = require_unsigned(self.value, self.BITS, self.TYPE_NAME)
        if value == 0:
            raise TryFromIntError(value, type(self).__name__)
        object.__setattr__(self, 'value', value)

    @classmethod
    def _wrap(cls: Type[N], value: int) -> N:
        # Bypasses __post_init__; callers have already established 0 < value <= MAX
        instance = object.__new__(cls)
        object.__setattr__(instance, 'value', value)
        return instance

    @classmethod
    def new(cls: Type[N], value) -> Optional[N]:
        """
        Create a scalar, or return None when value is zero.

        Args:
            value (int): Unsigned integer of this width

        Returns:
            Optional[NonZero]: The scalar, or None for zero

        Raises:
            TryFromIntError: If value does not fit in this width
        """
        value = require_unsigned(value, cls.BITS, cls.TYPE_NAME)
        if value == 0:
            return None
        return cls._wrap(value)

    @classmethod
    def new_unchecked(cls: Type[N], value: int) -> N:
        """
        Create a scalar without validating value.

        The caller must guarantee 0 < value <= MAX. This is only asserted, so
        under ``python -O`` a violation yields a scalar that breaks its own
        invariant. Prefer the constructor unless the check is measurable.
        """
        assert type(value) is int and 0 < value <= cls.max_value(), (
            f"{cls.__name__}.new_unchecked called with {value!r}"
        )
        return cls._wrap(value)

    @classmethod
    def parse(cls: Type[N], text: str) -> N:
        """
        Parse non-zero unsigned decimal text.

        Raises:
            ParseIntError: For empty, invalid, overflowing or zero input
        """
        return cls._wrap(parse_nonzero(text, cls.BITS))

    @classmethod
    def max_value(cls) -> int:
        """Largest plain integer this width can hold."""
        return unsigned_max(cls.BITS)

    def get(self) -> int:
        """Return the wrapped value as a plain int."""
        return self.value

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


class NonZeroU8(NonZero):
    """Non-zero unsigned 8-bit integer."""
    BITS = 8
    GUARANTEED_BITS = 8
    TYPE_NAME = 'u8'


class NonZeroU16(NonZero):
    """Non-zero unsigned 16-bit integer."""
    BITS = 16
    GUARANTEED_BITS = 16
    TYPE_NAME = 'u16'


class NonZeroU32(NonZero):
    """Non-zero unsigned 32-bit integer."""
    BITS = 32
    GUARANTEED_BITS = 32
    TYPE_NAME = 'u32'


class NonZeroU64(NonZero):
    """Non-zero unsigned 64-bit integer."""
    BITS = 64
    GUARANTEED_BITS = 64
    TYPE_NAME = 'u64'


class NonZeroU128(NonZero):
    """Non-zero unsigned 128-bit integer."""
    BITS = 128
    GUARANTEED_BITS = 128
    TYPE_NAME = 'u128'


class NonZeroUsize(NonZero):
    """
    Non-zero unsigned integer of the platform word size.

    BITS is the width on the running interpreter; portable code may only
    rely on GUARANTEED_BITS, so conversions into this type are lossless
    from 8 and 16 bits only, and conversions out of it are always fallible.
    """
    BITS = WORD_BITS
    GUARANTEED_BITS = 16
    PLATFORM_DEPENDENT = True
    TYPE_NAME = 'usize'


NONZERO_TYPES = (
    NonZeroU8,
    NonZeroU16,
    NonZeroU32,
    NonZeroU64,
    NonZeroU128,
    NonZeroUsize,
)

for _cls in NONZERO_TYPES:
    _cls.MIN = _cls._wrap(1)
    _cls.MAX = _cls._wrap(_cls.max_value())
del _cls
