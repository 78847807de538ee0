"""
IntWidth — Фиксированные разрядности целых чисел

Python int не ограничен по разрядности, поэтому ширина (8/16/32/64 бит)
и знаковость задаются явно через IntWidth:
- Проверка, что значение помещается в разрядность
- Two's-complement wrap при приведении результата к разрядности
"""

from enum import Enum
from typing import Final


# =============================================================================
# РАЗРЯДНОСТИ
# =============================================================================


class IntWidth(str, Enum):
    """Разрядность и знаковость целого числа."""

    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"

    @property
    def signed(self) -> bool:
        return not self.value.startswith("u")

    @property
    def bits(self) -> int:
        return int(self.value.removeprefix("u").removeprefix("int"))

    @property
    def min_value(self) -> int:
        """Минимальное представимое значение."""
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        """Максимальное представимое значение."""
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """True если value помещается в разрядность."""
        return self.min_value <= value <= self.max_value

    def require(self, value: int, name: str = "value") -> int:
        """
        Валидация, что целое значение помещается в разрядность.

        Args:
            value: Проверяемое значение
            name: Имя параметра (для сообщения об ошибке)

        Returns:
            value без изменений

        Raises:
            ValueError: Если value не int или вне [min_value, max_value]
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}")

        if not self.contains(value):
            raise ValueError(
                f"{name} {value} out of range for {self.value} "
                f"[{self.min_value}, {self.max_value}]"
            )
        return value

    def wrap(self, value: int) -> int:
        """
        Приведение произвольного int к разрядности (two's complement).

        Аналог unchecked-каста в языках с фиксированными типами:
        старшие биты отбрасываются, для знаковых типов старший бит
        интерпретируется как знак.

        Examples:
            >>> IntWidth.UINT8.wrap(300)
            44
            >>> IntWidth.INT8.wrap(200)
            -56
            >>> IntWidth.UINT16.wrap(-1)
            65535
        """
        mask = (1 << self.bits) - 1
        result = value & mask

        if self.signed and result > self.max_value:
            result -= 1 << self.bits

        return result

    @classmethod
    def unsigned(cls, bits: int) -> "IntWidth":
        """Беззнаковая разрядность для заданного числа бит."""
        return cls(f"uint{bits}")


# Разрядность по умолчанию для целочисленных операций (int в C-подобных языках)
DEFAULT_INT_WIDTH: Final[IntWidth] = IntWidth.INT32
