"""
Strongly-typed 1-based indices.

Provides OneBased* unsigned index types (8, 16, 32, 64, 128 bits and the
platform word size) that keep human-facing 1-based numbering apart from
0-based program indices. Zero can never be stored as a 1-based index, and
converting between conventions or widths is always explicit.

Typical usage example:

from one_based import OneBasedU32, OneBasedError
v = OneBasedU32.parse("5")
assert v.as_zero_based() == 4
assert v.as_one_based().get() == 5
"""

import logging

from .config import Config, ConfigManager, LoggingConfig, configure
from .conversions import is_lossless, narrow_nonzero, widen_nonzero
from .errors import (
    IntErrorKind,
    OneBasedError,
    OneBasedErrorKind,
    ParseIntError,
    TryFromIntError,
)
from .index import (
    INDEX_TYPES,
    OneBased,
    OneBasedU8,
    OneBasedU16,
    OneBasedU32,
    OneBasedU64,
    OneBasedU128,
    OneBasedUsize,
)
from .nonzero import (
    NONZERO_TYPES,
    WORD_BITS,
    NonZero,
    NonZeroU8,
    NonZeroU16,
    NonZeroU32,
    NonZeroU64,
    NonZeroU128,
    NonZeroUsize,
)

__version__ = "0.1.0"
__author__ = "AI Innovation Hub"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Index types
    "OneBased",
    "OneBasedU8",
    "OneBasedU16",
    "OneBasedU32",
    "OneBasedU64",
    "OneBasedU128",
    "OneBasedUsize",
    "INDEX_TYPES",
    # Non-zero scalars
    "NonZero",
    "NonZeroU8",
    "NonZeroU16",
    "NonZeroU32",
    "NonZeroU64",
    "NonZeroU128",
    "NonZeroUsize",
    "NONZERO_TYPES",
    "WORD_BITS",
    # Conversions
    "is_lossless",
    "narrow_nonzero",
    "widen_nonzero",
    # Errors
    "IntErrorKind",
    "OneBasedError",
    "OneBasedErrorKind",
    "ParseIntError",
    "TryFromIntError",
    # Config
    "Config",
    "ConfigManager",
    "LoggingConfig",
    "configure",
]
