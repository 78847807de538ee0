"""
Core math modules для numext

Сравнение, ограничение и нормализация чисел с плавающей точкой
и целых чисел фиксированной разрядности.
"""

# Floating point (double / single)
from numext.core.math.floating import (
    # Epsilon constants
    EPSILON,
    EPSILON_SINGLE,
    # Single precision
    is_single,
    to_single,
    # Epsilon comparisons
    equals_within,
    equals_within_single,
    # Clamp
    clamp_to_bounds,
    clamp_to_range,
    # Normalize
    normalize,
    normalize_range,
    normalize_range_single,
    normalize_single,
)

# Integers (int8 ... uint64)
from numext.core.math.integers import (
    normalize_int,
    normalize_int_range,
    normalize_integer,
    normalize_integer_range,
)

__all__ = [
    # Floating point — Epsilon constants
    "EPSILON",
    "EPSILON_SINGLE",
    # Floating point — Single precision
    "is_single",
    "to_single",
    # Floating point — Epsilon comparisons
    "equals_within",
    "equals_within_single",
    # Floating point — Clamp
    "clamp_to_bounds",
    "clamp_to_range",
    # Floating point — Normalize
    "normalize",
    "normalize_range",
    "normalize_range_single",
    "normalize_single",
    # Integers — Normalize
    "normalize_int",
    "normalize_int_range",
    "normalize_integer",
    "normalize_integer_range",
]
