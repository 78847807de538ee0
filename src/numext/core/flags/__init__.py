"""
Flag bit-field операции для numext

Разложение флаговых множеств на одиночные биты, сборка и проверки.
"""

from numext.core.flags.bitfield import (
    # Constants
    DEFAULT_FLAG_WIDTH,
    FLAG_WIDTHS,
    # Exceptions
    UnsupportedFlagWidthError,
    # Types
    BitField,
    FlagSequence,
    # Decomposition
    enumerate_flags,
    flag_width,
    is_single_flag,
    to_single_flags,
    # Composition and tests
    equals_any,
    equals_any_of,
    has_any_flag,
    has_any_flag_of,
    to_flags,
)

__all__ = [
    # Constants
    "DEFAULT_FLAG_WIDTH",
    "FLAG_WIDTHS",
    # Exceptions
    "UnsupportedFlagWidthError",
    # Types
    "BitField",
    "FlagSequence",
    # Decomposition
    "enumerate_flags",
    "flag_width",
    "is_single_flag",
    "to_single_flags",
    # Composition and tests
    "equals_any",
    "equals_any_of",
    "has_any_flag",
    "has_any_flag_of",
    "to_flags",
]
