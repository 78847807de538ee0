"""
numext — numeric and flag utilities.

Approximate float equality, clamping, linear range normalization for
floats and fixed-width integers, and bit-flag decomposition helpers.
"""

from numext.core.domain import Bounds, IntWidth
from numext.core.flags import (
    BitField,
    UnsupportedFlagWidthError,
    enumerate_flags,
    equals_any,
    equals_any_of,
    has_any_flag,
    has_any_flag_of,
    is_single_flag,
    to_flags,
    to_single_flags,
)
from numext.core.math import (
    EPSILON,
    EPSILON_SINGLE,
    clamp_to_bounds,
    clamp_to_range,
    equals_within,
    equals_within_single,
    normalize,
    normalize_int,
    normalize_int_range,
    normalize_integer,
    normalize_integer_range,
    normalize_range,
    normalize_range_single,
    normalize_single,
)

__version__ = "0.1.0"

__all__ = [
    "Bounds",
    "IntWidth",
    "BitField",
    "UnsupportedFlagWidthError",
    "enumerate_flags",
    "equals_any",
    "equals_any_of",
    "has_any_flag",
    "has_any_flag_of",
    "is_single_flag",
    "to_flags",
    "to_single_flags",
    "EPSILON",
    "EPSILON_SINGLE",
    "clamp_to_bounds",
    "clamp_to_range",
    "equals_within",
    "equals_within_single",
    "normalize",
    "normalize_int",
    "normalize_int_range",
    "normalize_integer",
    "normalize_integer_range",
    "normalize_range",
    "normalize_range_single",
    "normalize_single",
]
