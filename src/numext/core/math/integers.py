"""
Integer Normalize — Нормализация целых чисел фиксированной разрядности

Линейное отображение целого значения из одного диапазона в другой для
разрядностей int8/uint8 ... int64/uint64 (см. IntWidth):
- normalize_integer: результат float, дробная часть сохраняется
- normalize_int: частное усекается к нулю, затем прибавляется
  new_range_min, и результат приводится к разрядности
  (two's-complement wrap при выходе за диапазон)

Вся формула приводится к одной дроби в точной целочисленной арифметике,
поэтому float результат получается одним корректно округлённым делением
(int / int).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вырожденный исходный диапазон (range_min == range_max) — фатальная
   арифметическая ошибка: ZeroDivisionError, без fallback
2. Все аргументы обязаны помещаться в разрядность (ValueError)
"""

from typing import Final

import structlog

from numext.core.domain.bounds import RangeLike, unpack_range
from numext.core.domain.widths import DEFAULT_INT_WIDTH, IntWidth

logger = structlog.get_logger(__name__)

_ARG_NAMES: Final[tuple[str, ...]] = (
    "value",
    "range_min",
    "range_max",
    "new_range_min",
    "new_range_max",
)


# =============================================================================
# ВНУТРЕННИЕ ПРОВЕРКИ
# =============================================================================


def _require_width(width: IntWidth, *values: int) -> None:
    for name, value in zip(_ARG_NAMES, values):
        width.require(value, name)


def _source_span(range_min: int, range_max: int, width: IntWidth) -> int:
    span = range_max - range_min

    if span == 0:
        logger.warning(
            "normalize.degenerate_range",
            range_min=range_min,
            range_max=range_max,
            width=width.value,
        )
        raise ZeroDivisionError(
            f"source range is degenerate: range_min == range_max == {range_min}"
        )

    return span


def _truncating_divide(numerator: int, denominator: int) -> int:
    """Целочисленное деление с усечением к нулю (а не floor, как //)."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_integer(
    value: int,
    range_min: int,
    range_max: int,
    new_range_min: int,
    new_range_max: int,
    width: IntWidth = DEFAULT_INT_WIDTH,
) -> float:
    """
    Нормализация целого значения с результатом float.

    Формула:
        new_range_min + (value - range_min) * (new_range_max - new_range_min)
                      / (range_max - range_min)

    Args:
        value: Исходное значение
        range_min: Минимум исходного диапазона
        range_max: Максимум исходного диапазона
        new_range_min: Минимум целевого диапазона
        new_range_max: Максимум целевого диапазона
        width: Разрядность аргументов (default: INT32)

    Returns:
        Нормализованное значение (float, с дробной частью)

    Raises:
        ValueError: Если аргумент не помещается в width
        ZeroDivisionError: Если range_min == range_max

    Examples:
        >>> normalize_integer(5, 0, 10, 0, 100)
        50.0
        >>> normalize_integer(1, 0, 3, 0, 10, IntWidth.UINT8)
        3.3333333333333335
    """
    _require_width(width, value, range_min, range_max, new_range_min, new_range_max)
    span = _source_span(range_min, range_max, width)

    numerator = (value - range_min) * (new_range_max - new_range_min)
    return (new_range_min * span + numerator) / span


def normalize_int(
    value: int,
    range_min: int,
    range_max: int,
    new_range_min: int,
    new_range_max: int,
    width: IntWidth = DEFAULT_INT_WIDTH,
) -> int:
    """
    Нормализация целого значения с усечением до разрядности.

    Частное (value - range_min) * (new_range_max - new_range_min)
    / (range_max - range_min) усекается к нулю, и только затем к нему
    прибавляется new_range_min (целочисленная арифметика). При
    отрицательном new_range_min это не то же самое, что усечение
    результата normalize_integer: (1, 0, 2, -10, -5) даёт -10 + 2 = -8,
    а не trunc(-7.5) = -7.

    Результат приводится к width: если он вне диапазона width, старшие
    биты отбрасываются (как при unchecked-касте).

    Raises:
        ValueError: Если аргумент не помещается в width
        ZeroDivisionError: Если range_min == range_max

    Examples:
        >>> normalize_int(1, 0, 3, 0, 10, IntWidth.UINT8)
        3
        >>> normalize_int(-1, 0, 3, 0, 10, IntWidth.INT8)
        -3
        >>> normalize_int(30, 0, 10, 0, 100, IntWidth.UINT8)
        44
        >>> normalize_int(1, 0, 2, -10, -5, IntWidth.INT8)
        -8
    """
    _require_width(width, value, range_min, range_max, new_range_min, new_range_max)
    span = _source_span(range_min, range_max, width)

    numerator = (value - range_min) * (new_range_max - new_range_min)
    exact = new_range_min + _truncating_divide(numerator, span)
    result = width.wrap(exact)

    if result != exact:
        logger.debug(
            "normalize_int.wrapped",
            exact=exact,
            result=result,
            width=width.value,
        )

    return result


def normalize_integer_range(
    value: int,
    source_range: RangeLike,
    target_range: RangeLike,
    width: IntWidth = DEFAULT_INT_WIDTH,
) -> float:
    """normalize_integer с диапазонами, заданными парами (Bounds или 2-tuple)."""
    range_min, range_max = unpack_range(source_range)
    new_range_min, new_range_max = unpack_range(target_range)
    return normalize_integer(
        value, range_min, range_max, new_range_min, new_range_max, width
    )


def normalize_int_range(
    value: int,
    source_range: RangeLike,
    target_range: RangeLike,
    width: IntWidth = DEFAULT_INT_WIDTH,
) -> int:
    """normalize_int с диапазонами, заданными парами (Bounds или 2-tuple)."""
    range_min, range_max = unpack_range(source_range)
    new_range_min, new_range_max = unpack_range(target_range)
    return normalize_int(value, range_min, range_max, new_range_min, new_range_max, width)
