"""
Domain value types для numext

Разрядности целых чисел и включающие диапазоны.
"""

from .bounds import Bounds, RangeLike, unpack_range
from .widths import DEFAULT_INT_WIDTH, IntWidth

__all__ = [
    # Widths
    "DEFAULT_INT_WIDTH",
    "IntWidth",
    # Bounds
    "Bounds",
    "RangeLike",
    "unpack_range",
]
