"""
Floating Point — Сравнение, ограничение и нормализация float

Модуль покрывает double (Python float) и single (numpy.float32) точность:
- Сравнение с абсолютной толерантностью, с учётом NaN/Inf и None
- Ограничение значения включающим диапазоном
- Линейное отображение значения из одного диапазона в другой

ИНВАРИАНТЫ:
1. equals_within — тотальная функция, никогда не бросает исключений
2. clamp проверяет "больше максимума" ПЕРВЫМ (важно для перевёрнутых диапазонов)
3. normalize следует IEEE 754: вырожденный диапазон даёт Inf/NaN, а не исключение
"""

import math
from typing import Final, Optional, TypeVar, Union

import numpy as np

from numext.core.domain.bounds import RangeLike, unpack_range

T = TypeVar("T")

Real = Union[int, float, np.floating]

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Максимальная разница между двумя "равными" double
EPSILON: Final[float] = 1e-9

# Максимальная разница между двумя "равными" single (тот же литерал в float32)
EPSILON_SINGLE: Final[float] = float(np.float32(1e-9))


# =============================================================================
# SINGLE PRECISION
# =============================================================================


def to_single(value: Real) -> np.float32:
    """Округление значения до single precision (float32)."""
    return np.float32(value)


def is_single(value: object) -> bool:
    """True если значение имеет single precision."""
    return isinstance(value, np.float32)


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def equals_within(
    left: Optional[Real],
    right: Optional[Real],
    within: float = EPSILON,
) -> bool:
    """
    Проверка равенства двух значений в пределах толерантности.

    Правила (в порядке проверки):
    1. Ровно одно значение None → False; оба None → True
    2. Оба значения бесконечны (знаки не важны) → True
    3. Оба значения NaN → True
    4. abs(left - right) < within (строго меньше)

    Если оба значения float32, разница вычисляется в single precision.
    Иначе (double/double или смешанная точность) оба значения
    расширяются до double перед вычитанием.

    Args:
        left: Первое значение (может быть None)
        right: Второе значение (может быть None)
        within: Максимальная допустимая разница (default: EPSILON)

    Returns:
        True если значения считаются равными

    Examples:
        >>> equals_within(1.0, 1.0 + 1e-10)
        True
        >>> equals_within(float("inf"), float("-inf"))
        True
        >>> equals_within(float("nan"), float("nan"))
        True
        >>> equals_within(None, 1.0)
        False
    """
    if left is None or right is None:
        return left is None and right is None

    if math.isinf(left) and math.isinf(right):
        return True

    if math.isnan(left) and math.isnan(right):
        return True

    if is_single(left) and is_single(right):
        with np.errstate(over="ignore", invalid="ignore"):
            diff = np.abs(left - right)
        return bool(diff < np.float32(within))

    return abs(float(left) - float(right)) < within


def equals_within_single(
    left: Optional[Real],
    right: Optional[Real],
    within: float = EPSILON_SINGLE,
) -> bool:
    """
    Сравнение с single precision левым операндом.

    left и within округляются до float32. Если right тоже float32,
    сравнение идёт в single precision; если right — обычный float,
    разница вычисляется в double (смешанная точность).
    """
    if left is not None:
        left = to_single(left)

    return equals_within(left, right, float(to_single(within)))


# =============================================================================
# ОГРАНИЧЕНИЕ ДИАПАЗОНОМ
# =============================================================================


def clamp_to_bounds(value: T, min_value: T, max_value: T) -> T:
    """
    Ограничение значения включающим диапазоном [min_value, max_value].

    Сначала проверяется value > max_value, затем value < min_value.
    При перевёрнутом диапазоне (min_value > max_value) порядок проверок
    определяет результат и сохраняется намеренно.

    Работает для любых сравнимых чисел (int любой разрядности, float, float32).

    Examples:
        >>> clamp_to_bounds(15.0, 0.0, 10.0)
        10.0
        >>> clamp_to_bounds(-1, 0, 10)
        0
        >>> clamp_to_bounds(5, 10, 0)
        0
    """
    if value > max_value:
        return max_value
    if value < min_value:
        return min_value
    return value


def clamp_to_range(value: T, bounds: RangeLike) -> T:
    """
    Ограничение значения диапазоном, заданным парой.

    Args:
        value: Исходное значение
        bounds: Bounds или (minimum, maximum)

    Returns:
        Значение в пределах bounds (см. clamp_to_bounds)
    """
    min_value, max_value = unpack_range(bounds)
    return clamp_to_bounds(value, min_value, max_value)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def _remap(value, range_min, range_max, new_range_min, new_range_max):
    # Значения уже приведены к нужному numpy-типу
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return new_range_min + (value - range_min) * (new_range_max - new_range_min) / (
            range_max - range_min
        )


def normalize(
    value: Real,
    range_min: Real,
    range_max: Real,
    new_range_min: Real,
    new_range_max: Real,
) -> float:
    """
    Линейное отображение значения из [range_min, range_max]
    в [new_range_min, new_range_max] с double precision.

    Формула:
        new_range_min + (value - range_min) * (new_range_max - new_range_min)
                      / (range_max - range_min)

    Вырожденный исходный диапазон (range_min == range_max) не является
    ошибкой: результат Inf или NaN по правилам IEEE 754.

    Args:
        value: Исходное значение
        range_min: Минимум исходного диапазона
        range_max: Максимум исходного диапазона
        new_range_min: Минимум целевого диапазона
        new_range_max: Максимум целевого диапазона

    Returns:
        Нормализованное значение (float)

    Examples:
        >>> normalize(5.0, 0.0, 10.0, 0.0, 100.0)
        50.0
        >>> normalize(2.5, 0.0, 10.0, -1.0, 1.0)
        -0.5
        >>> normalize(1.0, 2.0, 2.0, 0.0, 1.0)
        -inf
    """
    result = _remap(
        np.float64(value),
        np.float64(range_min),
        np.float64(range_max),
        np.float64(new_range_min),
        np.float64(new_range_max),
    )
    return float(result)


def normalize_single(
    value: Real,
    range_min: Real,
    range_max: Real,
    new_range_min: Real,
    new_range_max: Real,
) -> np.float32:
    """
    То же, что normalize, но все операнды и вычисления в single precision.

    Returns:
        Нормализованное значение (numpy.float32)
    """
    return _remap(
        to_single(value),
        to_single(range_min),
        to_single(range_max),
        to_single(new_range_min),
        to_single(new_range_max),
    )


def normalize_range(value: Real, source_range: RangeLike, target_range: RangeLike) -> float:
    """
    normalize с диапазонами, заданными парами (Bounds или 2-tuple).

    Examples:
        >>> normalize_range(5.0, (0.0, 10.0), (0.0, 100.0))
        50.0
    """
    range_min, range_max = unpack_range(source_range)
    new_range_min, new_range_max = unpack_range(target_range)
    return normalize(value, range_min, range_max, new_range_min, new_range_max)


def normalize_range_single(
    value: Real, source_range: RangeLike, target_range: RangeLike
) -> np.float32:
    """normalize_single с диапазонами, заданными парами."""
    range_min, range_max = unpack_range(source_range)
    new_range_min, new_range_max = unpack_range(target_range)
    return normalize_single(value, range_min, range_max, new_range_min, new_range_max)
