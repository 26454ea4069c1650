"""
Conversion rules between widths.

Conversions always move the positive 1-based value, never the 0-based one:
the 1-based value is already known to be non-zero, so widening needs no
check at all and narrowing only has to check the upper bound.

A conversion is lossless when the target can hold every source value on
every platform:

    source \\ target   u8   u16  u32  u64  u128 usize
    u8                 =    yes  yes  yes  yes  yes
    u16                -    =    yes  yes  yes  yes
    u32                -    -    =    yes  yes  -
    u64                -    -    -    =    yes  -
    u128               -    -    -    -    =    -
    usize              -    -    -    -    -    =

Every other pair is fallible and raises TryFromIntError when the value is
larger than the target MAX.
"""

from typing import Type, TypeVar

from .errors import TryFromIntError
from .nonzero import NonZero
from .utils.logger_setup import get_logger

logger = get_logger(__name__)

N = TypeVar('N', bound=NonZero)


def _width_of(cls) -> Type[NonZero]:
    """Resolve an index class or scalar class to its scalar class."""
    nonzero = getattr(cls, 'NONZERO', cls)
    if (
        not isinstance(nonzero, type)
        or not issubclass(nonzero, NonZero)
        or nonzero is NonZero
    ):
        raise TypeError(f"{cls!r} is not an index or non-zero scalar type")
    return nonzero


def is_lossless(source, target) -> bool:
    """
    Tell whether every source value fits in target on every platform.

    Args:
        source: Index class or non-zero scalar class converted from
        target: Index class or non-zero scalar class converted to

    Returns:
        bool: True if the conversion can never fail

    Example:
        >>> is_lossless(NonZeroU8, NonZeroUsize)
        True
        >>> is_lossless(NonZeroU32, NonZeroUsize)
        False
    """
    src, dst = _width_of(source), _width_of(target)
    if src is dst:
        return True
    if src.PLATFORM_DEPENDENT:
        return False
    return src.BITS <= dst.GUARANTEED_BITS


def widen_nonzero(value: NonZero, target: Type[N]) -> N:
    """
    Convert a scalar into a width that can always hold it.

    Args:
        value (NonZero): Scalar to convert
        target (Type[NonZero]): Scalar class to convert into

    Returns:
        NonZero: Scalar of the target width with the same value

    Raises:
        TypeError: If the pair is not lossless (use narrow_nonzero)
    """
    source = type(value)
    if not is_lossless(source, target):
        raise TypeError(
            f"no lossless conversion from {source.__name__} to "
            f"{target.__name__}; use a fallible conversion"
        )
    if source is target:
        return value
    return target._wrap(value.value)


def narrow_nonzero(value: NonZero, target: Type[N]) -> N:
    """
    Convert a scalar into a width that may be too small to hold it.

    Args:
        value (NonZero): Scalar to convert
        target (Type[NonZero]): Scalar class to convert into

    Returns:
        NonZero: Scalar of the target width with the same value

    Raises:
        TryFromIntError: If value is larger than target.MAX
    """
    if is_lossless(type(value), target):
        return widen_nonzero(value, target)
    if value.value > target.max_value():
        logger.debug(
            f"{type(value).__name__}({value.value}) does not fit in {target.__name__}"
        )
        raise TryFromIntError(value.value, target.TYPE_NAME)
    return target._wrap(value.value)
