"""
Flags — Разложение и сборка битовых флагов

Флаговое множество — беззнаковый битовый шаблон ширины W ∈ {8, 16, 32, 64}.
Поддерживаются три представления:
- обычный неотрицательный int (W = 64 по умолчанию)
- член enum.Flag / enum.IntFlag (W = минимальная ширина, вмещающая все
  объявленные члены)
- BitField(value, width) — явная типизированная обёртка

Результаты операций имеют тот же вид, что и вход (int → int,
член enum → член того же enum, BitField → BitField той же ширины).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. enumerate_flags для пустого множества выдаёт нулевое значение ровно
   один раз (никогда не пустую последовательность)
2. has_any_flag требует, чтобы кандидат содержался ЦЕЛИКОМ (все его биты),
   а не пересекался хотя бы одним битом
3. Ширины кроме 8/16/32/64 отклоняются (UnsupportedFlagWidthError)
"""

import enum
from dataclasses import dataclass
from typing import Any, Final, Iterable, Iterator, List, Optional

import structlog
from pydantic import BaseModel, Field, field_validator, model_validator

logger = structlog.get_logger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Поддерживаемые ширины битового поля (бит)
FLAG_WIDTHS: Final[tuple[int, ...]] = (8, 16, 32, 64)

# Ширина для обычных int, когда она не указана явно
DEFAULT_FLAG_WIDTH: Final[int] = 64


# =============================================================================
# ИСКЛЮЧЕНИЯ
# =============================================================================


class UnsupportedFlagWidthError(Exception):
    """
    Ширина флагового множества не входит в FLAG_WIDTHS.

    Возникает для явно заданной неподдерживаемой ширины или для enum.Flag,
    члены которого не помещаются в 64 бита.
    """

    def __init__(self, width: int, source: str = "flag set") -> None:
        self.width = width
        self.source = source
        super().__init__(
            f"{source} needs {width} bits; supported widths are {FLAG_WIDTHS}"
        )


def _check_width(width: int, source: str = "flag set") -> int:
    if width not in FLAG_WIDTHS:
        logger.warning("flags.unsupported_width", width=width, source=source)
        raise UnsupportedFlagWidthError(width, source)
    return width


# =============================================================================
# BITFIELD MODEL
# =============================================================================


class BitField(BaseModel):
    """
    Беззнаковое битовое поле фиксированной ширины.

    Immutable модель (frozen=True). Операции | и & возвращают новый
    BitField той же ширины.
    """

    value: int = Field(..., ge=0, strict=True, description="Битовый шаблон")
    width: int = Field(
        default=DEFAULT_FLAG_WIDTH, strict=True, description="Ширина поля (бит)"
    )

    model_config = {"frozen": True}

    @field_validator("width")
    @classmethod
    def validate_width(cls, v: int) -> int:
        """Только 8/16/32/64 бит."""
        return _check_width(v, cls.__name__)

    @model_validator(mode="after")
    def validate_value_fits(self) -> "BitField":
        if self.value.bit_length() > self.width:
            raise ValueError(
                f"value {self.value:#x} does not fit in {self.width} bits"
            )
        return self

    def __or__(self, other: Any) -> "BitField":
        return BitField(value=self.value | _bits(other), width=self.width)

    __ror__ = __or__

    def __and__(self, other: Any) -> "BitField":
        return BitField(value=self.value & _bits(other), width=self.width)

    __rand__ = __and__

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def is_single_flag(self) -> bool:
        return is_single_flag(self)

    def flags(self) -> "FlagSequence":
        """Ленивая последовательность установленных битов (см. enumerate_flags)."""
        return enumerate_flags(self)


# =============================================================================
# ПРЕДСТАВЛЕНИЯ
# =============================================================================


def flag_width(flag_type: type) -> int:
    """
    Ширина хранения для типа enum.Flag.

    Минимальная ширина из FLAG_WIDTHS, вмещающая все объявленные члены
    (включая алиасы).

    Raises:
        UnsupportedFlagWidthError: Если члены требуют больше 64 бит

    Examples:
        >>> class Access(enum.IntFlag):
        ...     READ = 1
        ...     WRITE = 2
        >>> flag_width(Access)
        8
    """
    declared = 0
    for member in flag_type.__members__.values():
        declared |= member.value

    needed = declared.bit_length()
    for width in FLAG_WIDTHS:
        if needed <= width:
            return width

    logger.warning("flags.unsupported_width", width=needed, source=flag_type.__name__)
    raise UnsupportedFlagWidthError(needed, flag_type.__name__)


def _raw_bits(value: Any) -> int:
    """Битовый шаблон значения как неотрицательный int (без проверки ширины)."""
    if isinstance(value, BitField):
        return value.value

    if isinstance(value, enum.Flag):
        bits = value.value
    elif isinstance(value, int) and not isinstance(value, bool):
        bits = value
    else:
        raise ValueError(
            f"flag value must be an int, enum.Flag or BitField, got {value!r}"
        )

    if bits < 0:
        raise ValueError(f"flag value must be non-negative, got {bits}")
    return bits


def _native_width(value: Any) -> int:
    """Ширина по виду значения: BitField — своя, enum — flag_width, int — 64."""
    if isinstance(value, BitField):
        return value.width
    if isinstance(value, enum.Flag):
        return flag_width(type(value))
    return DEFAULT_FLAG_WIDTH


def _fit(bits: int, width: int) -> int:
    if bits.bit_length() > width:
        raise ValueError(f"flag value {bits:#x} does not fit in {width} bits")
    return bits


def _bits(value: Any) -> int:
    """
    Битовый шаблон значения, проверенный по его ширине.

    Raises:
        UnsupportedFlagWidthError: Если enum.Flag требует больше 64 бит
        ValueError: Если значение отрицательное или шире своей ширины
    """
    return _fit(_raw_bits(value), _native_width(value))


def _resolve_width(value: Any, width: Optional[int]) -> int:
    bits = _bits(value)
    if width is None:
        return _native_width(value)

    resolved = _check_width(width)
    _fit(bits, resolved)
    return resolved


def _rebuild(prototype: Any, bits: int) -> Any:
    """Значение того же вида, что prototype, с битами bits."""
    if isinstance(prototype, BitField):
        return BitField(value=bits, width=prototype.width)
    if isinstance(prototype, enum.Flag):
        return type(prototype)(bits)
    return bits


# =============================================================================
# РАЗЛОЖЕНИЕ
# =============================================================================


@dataclass(frozen=True)
class FlagSequence:
    """
    Ленивая конечная последовательность одиночных флагов.

    Каждый вызов iter() начинает обход заново с бита 0, поэтому
    последовательность можно обходить многократно. Для пустого множества
    выдаётся нулевое значение ровно один раз.
    """

    source: Any
    width: int

    def __iter__(self) -> Iterator[Any]:
        bits = _bits(self.source)

        if bits == 0:
            yield _rebuild(self.source, 0)
            return

        for position in range(self.width):
            bit = 1 << position
            if bits & bit:
                yield _rebuild(self.source, bit)


def is_single_flag(value: Any) -> bool:
    """
    Проверка, что установлено 0 или 1 бит.

    Examples:
        >>> is_single_flag(0)
        True
        >>> is_single_flag(4)
        True
        >>> is_single_flag(5)
        False
    """
    bits = _bits(value)
    return bits == 0 or (bits & (bits - 1)) == 0


def enumerate_flags(value: Any, width: Optional[int] = None) -> FlagSequence:
    """
    Перечисление установленных битов по возрастанию позиции.

    Args:
        value: int, член enum.Flag или BitField
        width: Явная ширина (только для переопределения; default: по виду value)

    Returns:
        FlagSequence: по одному одиночному флагу на каждый установленный бит;
        нулевое значение (один элемент), если биты не установлены

    Raises:
        UnsupportedFlagWidthError: Если ширина не из FLAG_WIDTHS
        ValueError: Если value отрицательное или шире width

    Examples:
        >>> list(enumerate_flags(5))
        [1, 4]
        >>> list(enumerate_flags(0))
        [0]
    """
    return FlagSequence(source=value, width=_resolve_width(value, width))


def to_single_flags(value: Any, width: Optional[int] = None) -> List[Any]:
    """Разбиение значения на список одиночных флагов (см. enumerate_flags)."""
    return list(enumerate_flags(value, width))


# =============================================================================
# СБОРКА И ПРОВЕРКИ
# =============================================================================


def to_flags(flags: Iterable[Any], zero: Optional[Any] = None) -> Any:
    """
    Объединение флагов побитовым OR, начиная с нулевого значения.

    Вид результата задаёт zero; если zero не указан — первый элемент.
    Пустая коллекция даёт zero (или 0).

    Args:
        flags: Коллекция флагов
        zero: Нулевое значение нужного вида (например, Access(0))

    Returns:
        Значение со всеми битами из flags

    Examples:
        >>> to_flags([1, 4])
        5
        >>> to_flags([])
        0
    """
    prototype = zero
    result = 0 if zero is None else _bits(zero)

    for flag in flags:
        if prototype is None:
            prototype = flag
        result |= _bits(flag)

    if prototype is None:
        return result
    return _rebuild(prototype, result)


def has_any_flag(value: Any, flags: Iterable[Any]) -> bool:
    """
    Проверка, что хотя бы один кандидат целиком содержится в value.

    Кандидат с несколькими битами засчитывается, только если ВСЕ его биты
    установлены в value. Нулевой кандидат содержится всегда.

    Examples:
        >>> has_any_flag(6, [4, 8])
        True
        >>> has_any_flag(6, [12])
        False
    """
    bits = _bits(value)
    for flag in flags:
        candidate = _bits(flag)
        if bits & candidate == candidate:
            return True
    return False


def has_any_flag_of(value: Any, *flags: Any) -> bool:
    """has_any_flag с кандидатами в виде отдельных аргументов."""
    return has_any_flag(value, flags)


def equals_any(value: Any, flags: Iterable[Any]) -> bool:
    """
    Проверка, что битовый шаблон value совпадает хотя бы с одним кандидатом.

    Examples:
        >>> equals_any(6, [2, 4, 6])
        True
    """
    bits = _bits(value)
    return any(bits == _bits(flag) for flag in flags)


def equals_any_of(value: Any, *flags: Any) -> bool:
    """equals_any с кандидатами в виде отдельных аргументов."""
    return equals_any(value, flags)
