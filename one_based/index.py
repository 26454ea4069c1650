"""
1-based index types.

Humans usually count from 1 (line 1, page 1, the first item), while
programs index from 0. Passing plain ints between the two worlds makes it
hard to tell which convention a value follows. The OneBased* types hold a
1-based index and make every crossing explicit:

- Internal (code operations): as_zero_based() / from_zero_based()
- External (user-facing, storage): as_one_based() / from_one_based(),
  parse() and str()

Typical usage example:

    from one_based import OneBasedU32
    v = OneBasedU32.parse("5")
    v.as_zero_based()         # 4
    v.as_one_based().get()    # 5
    OneBasedU32.from_one_based(0)   # raises OneBasedError (ZERO_INDEX)
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Type, TypeVar

from .conversions import narrow_nonzero, widen_nonzero
from .errors import OneBasedError, ParseIntError
from .nonzero import (
    NonZero,
    NonZeroU8,
    NonZeroU16,
    NonZeroU32,
    NonZeroU64,
    NonZeroU128,
    NonZeroUsize,
    require_unsigned,
)
from .utils.logger_setup import get_logger
from .utils.schemas import one_based_core_schema, one_based_json_schema

logger = get_logger(__name__)

IndexT = TypeVar('IndexT', bound='OneBased')


def _require_index_type(target: Any) -> 'Type[OneBased]':
    if (
        not isinstance(target, type)
        or not issubclass(target, OneBased)
        or target is OneBased
    ):
        raise TypeError(f"{target!r} is not a OneBased index type")
    return target


@dataclass(frozen=True, order=True)
class OneBased:
    """
    Base class of the 1-based index types.

    Do not instantiate directly; use a width such as OneBasedU32. Values are
    immutable, hashable and ordered by their 1-based value. Indices of
    different widths never compare equal; convert them first with into() or
    try_into().

    There is no int() conversion on purpose: pick as_zero_based() or
    as_one_based() explicitly.

    Attributes:
        raw (NonZero): The 1-based value, a non-zero scalar of this width
    """
    raw: NonZero

    NONZERO: ClassVar[Type[NonZero]]
    MIN: ClassVar['OneBased']
    MAX: ClassVar['OneBased']

    def __post_init__(self):
        if type(self) is OneBased:
            raise TypeError("OneBased is abstract; use a width such as OneBasedU32")
        if type(self.raw) is not self.NONZERO:
            raise TypeError(
                f"{type(self).__name__} wraps {self.NONZERO.__name__}, "
                f"got {type(self.raw).__name__}"
            )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_one_based(cls: Type[IndexT], v: int) -> IndexT:
        """
        Create an index from a 1-based value.

        Args:
            v (int): 1-based index, an unsigned integer of this width

        Returns:
            OneBased: The index

        Raises:
            OneBasedError: ZERO_INDEX if v is 0
            TryFromIntError: If v is negative or above this width's MAX
            TypeError: If v is not an int

        Example:
            >>> OneBasedU8.from_one_based(5).as_zero_based()
            4
        """
        width = cls.NONZERO
        value = require_unsigned(v, width.BITS, width.TYPE_NAME)
        if value == 0:
            logger.debug(f"Rejected 0 as 1-based {cls.__name__}")
            raise OneBasedError.zero_index(width.TYPE_NAME)
        return cls(width._wrap(value))

    @classmethod
    def from_one_based_unchecked(cls: Type[IndexT], v: int) -> IndexT:
        """
        Create an index from a 1-based value without validating it.

        The caller MUST guarantee 0 < v <= MAX. The precondition is only
        checked by ``assert``: a violation raises AssertionError normally and
        goes undetected under ``python -O``, producing an index whose value
        is zero or out of range. Treat a violation like an out-of-bounds
        unchecked array access. Use from_one_based() unless the check shows
        up in a profile.
        """
        return cls(cls.NONZERO.new_unchecked(v))

    @classmethod
    def from_one_based_nonzero(cls: Type[IndexT], v: NonZero) -> IndexT:
        """
        Create an index from a non-zero scalar of the same width.

        Always succeeds: the scalar already carries the non-zero guarantee.

        Raises:
            TypeError: If v is not this width's non-zero scalar
        """
        return cls(v)

    @classmethod
    def from_zero_based(cls: Type[IndexT], v: int) -> IndexT:
        """
        Create an index from a 0-based value.

        Args:
            v (int): 0-based index, an unsigned integer of this width

        Returns:
            OneBased: The index, holding v + 1

        Raises:
            OneBasedError: OVERFLOW_INDEX if v is MAX, since v + 1 would not
                fit in this width
            TryFromIntError: If v is negative or above this width's MAX
            TypeError: If v is not an int

        Example:
            >>> OneBasedU8.from_zero_based(0).as_one_based().get()
            1
        """
        width = cls.NONZERO
        value = require_unsigned(v, width.BITS, width.TYPE_NAME)
        if value == width.max_value():
            logger.debug(f"Rejected {width.TYPE_NAME}::MAX as 0-based {cls.__name__}")
            raise OneBasedError.overflow_index(width.TYPE_NAME)
        return cls(width._wrap(value + 1))

    @classmethod
    def from_zero_based_unchecked(cls: Type[IndexT], v: int) -> IndexT:
        """
        Create an index from a 0-based value without validating it.

        The caller MUST guarantee 0 <= v < MAX. As with
        from_one_based_unchecked(), this is only asserted; under
        ``python -O`` passing MAX yields an index above the width's range.
        """
        width = cls.NONZERO
        assert type(v) is int and 0 <= v < width.max_value(), (
            f"{cls.__name__}.from_zero_based_unchecked called with {v!r}"
        )
        return cls(width._wrap(v + 1))

    @classmethod
    def parse(cls: Type[IndexT], text: str) -> IndexT:
        """
        Parse user-facing 1-based text such as "42".

        Accepts ASCII digits only; leading zeros are allowed, signs and
        whitespace are not.

        Raises:
            ParseIntError: EMPTY, INVALID_DIGIT, POS_OVERFLOW, or ZERO for a
                literal zero (distinct from OneBasedError.ZERO_INDEX)
        """
        try:
            nonzero = cls.NONZERO.parse(text)
        except ParseIntError as exc:
            logger.debug(f"Could not parse {text!r} as {cls.__name__}: {exc.kind.value}")
            raise
        return cls(nonzero)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def as_zero_based(self) -> int:
        """Return the 0-based index. Never negative."""
        return self.raw.value - 1

    def as_one_based(self) -> NonZero:
        """Return the 1-based index as a non-zero scalar."""
        return self.raw

    # ------------------------------------------------------------------
    # Width conversions
    # ------------------------------------------------------------------

    def into(self, target: Type[IndexT]) -> IndexT:
        """
        Convert to a width that can hold every value of this one.

        Raises:
            TypeError: If the conversion could fail on some value or
                platform; use try_into() instead
        """
        target = _require_index_type(target)
        return target(widen_nonzero(self.raw, target.NONZERO))

    def try_into(self, target: Type[IndexT]) -> IndexT:
        """
        Convert to any width, failing if the value does not fit.

        Raises:
            TryFromIntError: If the 1-based value is above target's MAX
        """
        target = _require_index_type(target)
        return target(narrow_nonzero(self.raw, target.NONZERO))

    @classmethod
    def from_index(cls: Type[IndexT], other: 'OneBased') -> IndexT:
        """Lossless conversion from another width; see into()."""
        return other.into(cls)

    @classmethod
    def try_from_index(cls: Type[IndexT], other: 'OneBased') -> IndexT:
        """Fallible conversion from another width; see try_into()."""
        return other.try_into(cls)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        # Always the 1-based value, so str(parse(s)) == s for canonical s
        return str(self.raw.value)

    def __format__(self, format_spec: str) -> str:
        return format(self.raw.value, format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw!r})"

    # ------------------------------------------------------------------
    # pydantic
    # ------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any):
        return one_based_core_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any):
        return one_based_json_schema(cls, schema, handler)


class OneBasedU8(OneBased):
    """
    Represents 1-based index of u8.

    To describe configuration by humans, a 1-based index is often easier to
    understand than a 0-based one; programs prefer 0-based. OneBasedU8
    keeps track of which is which.

    Example:
        >>> v = OneBasedU8.from_one_based(5)
        >>> v.as_zero_based()
        4
        >>> OneBasedU8.from_zero_based(0).as_one_based().get()
        1
    """
    NONZERO = NonZeroU8


class OneBasedU16(OneBased):
    """Represents 1-based index of u16."""
    NONZERO = NonZeroU16


class OneBasedU32(OneBased):
    """Represents 1-based index of u32."""
    NONZERO = NonZeroU32


class OneBasedU64(OneBased):
    """Represents 1-based index of u64."""
    NONZERO = NonZeroU64


class OneBasedU128(OneBased):
    """Represents 1-based index of u128."""
    NONZERO = NonZeroU128


class OneBasedUsize(OneBased):
    """
    Represents 1-based index of usize, the platform word size.

    Only 8- and 16-bit indices convert into this type losslessly; every
    conversion out of it is fallible, even where the running platform
    would make it safe.
    """
    NONZERO = NonZeroUsize


INDEX_TYPES = (
    OneBasedU8,
    OneBasedU16,
    OneBasedU32,
    OneBasedU64,
    OneBasedU128,
    OneBasedUsize,
)

for _cls in INDEX_TYPES:
    _cls.MIN = _cls(_cls.NONZERO.MIN)
    _cls.MAX = _cls(_cls.NONZERO.MAX)
del _cls
