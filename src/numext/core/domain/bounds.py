"""
Bounds — Модель включающего диапазона

Immutable Pydantic модель пары (minimum, maximum), обе границы включительно.
Используется как альтернатива двум скалярам в clamp/normalize.

Инвариант minimum <= maximum НЕ проверяется: перевёрнутый диапазон допустим
и даёт естественный для формул результат (отрицательный масштаб в normalize,
приоритет максимума в clamp).
"""

from typing import Tuple, Union

import numpy as np
from pydantic import BaseModel, Field

# Граница диапазона: numpy.float32/float64 сохраняются как есть
Scalar = Union[np.floating, int, float]


# =============================================================================
# BOUNDS MODEL
# =============================================================================


class Bounds(BaseModel):
    """
    Включающий диапазон [minimum, maximum].

    Immutable модель (frozen=True). Типы границ сохраняются: int остаются int,
    float остаются float, numpy.float32 остаются float32 (single precision
    в clamp_to_range и normalize_range_single не теряется).
    """

    minimum: Scalar = Field(..., description="Нижняя граница (включительно)")
    maximum: Scalar = Field(..., description="Верхняя граница (включительно)")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @classmethod
    def of(cls, minimum: Scalar, maximum: Scalar) -> "Bounds":
        """Позиционный конструктор: Bounds.of(0, 10)."""
        return cls(minimum=minimum, maximum=maximum)

    def as_tuple(self) -> Tuple[Scalar, Scalar]:
        """Пара (minimum, maximum)."""
        return (self.minimum, self.maximum)


# Диапазон может быть передан как Bounds или как обычный 2-tuple
RangeLike = Union[Bounds, Tuple]


def unpack_range(bounds: RangeLike) -> Tuple:
    """
    Приведение Bounds или 2-tuple к паре (minimum, maximum).

    Args:
        bounds: Bounds или (minimum, maximum)

    Returns:
        Пара (minimum, maximum) без преобразования типов значений

    Raises:
        ValueError: Если tuple не из двух элементов

    Examples:
        >>> unpack_range((0, 10))
        (0, 10)
        >>> unpack_range(Bounds.of(-1.0, 1.0))
        (-1.0, 1.0)
    """
    if isinstance(bounds, Bounds):
        return bounds.as_tuple()

    try:
        minimum, maximum = bounds
    except (TypeError, ValueError) as exc:
        raise ValueError(f"range must be a (min, max) pair, got {bounds!r}") from exc

    return (minimum, maximum)
