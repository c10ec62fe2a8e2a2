"""
Numeric Tower — Варианты представления и канонизация

Модуль определяет замкнутое множество числовых представлений:
- Int32   — точное signed 32-bit целое
- Int64   — точное signed 64-bit целое, НЕ помещающееся в 32 бита
- Float64 — IEEE-754 double (finite, ±inf, NaN)
- BigInt  — целое произвольной точности, НЕ помещающееся в 64 бита

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Canonical form: значение всегда хранится в самом узком точном варианте
2. Инвариант проверяется конструктором каждого варианта (ValueError)
3. Все варианты immutable (frozen dataclass)
4. Любое значение вне замкнутого множества → UnsupportedOperand
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from src.core.math.limits import fits_int32, fits_int64

# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumericError(Exception):
    """Базовое исключение numeric tower."""
    pass


class UnsupportedOperand(NumericError, TypeError):
    """
    Операнд вне замкнутого множества {Int32, Int64, Float64, BigInt}.

    Нарушение контракта вызывающей стороны (не ошибка данных): внешние
    значения должны входить в tower только через from_scalar.
    """
    pass


class DivisionByZero(NumericError, ZeroDivisionError):
    """
    Целочисленное деление на ноль.

    ВАЖНО: деление на float ноль НЕ является ошибкой — действует IEEE-754
    (±inf или NaN).
    """
    pass


def unsupported(operation: str, *operands: Any) -> UnsupportedOperand:
    """Сформировать UnsupportedOperand с именами типов операндов."""
    names = ", ".join(type(x).__name__ for x in operands)
    return UnsupportedOperand(f"{operation}({names}): operand outside the numeric tower")


def require_operands(operation: str, *operands: Any) -> None:
    """
    Проверка, что все операнды принадлежат numeric tower.

    Raises:
        UnsupportedOperand: Если хотя бы один операнд вне {Int32, Int64, Float64, BigInt}
    """
    if not all(isinstance(x, TOWER_TYPES) for x in operands):
        raise unsupported(operation, *operands)


# =============================================================================
# ВАРИАНТЫ
# =============================================================================


class Number:
    """
    Общий базовый класс замкнутого множества числовых вариантов.

    Не инстанцируется напрямую. Подклассы: Int32, Int64, Float64, BigInt.
    """

    value: Union[int, float]

    def __str__(self) -> str:
        return format_number(self)


def _require_int(kind: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} requires int, got {type(value).__name__}")


@dataclass(frozen=True)
class Int32(Number):
    """Точное signed 32-bit целое."""

    value: int

    def __post_init__(self) -> None:
        _require_int("Int32", self.value)
        if not fits_int32(self.value):
            raise ValueError(f"Int32 out of range: {self.value}")


@dataclass(frozen=True)
class Int64(Number):
    """Точное signed 64-bit целое вне 32-битного диапазона."""

    value: int

    def __post_init__(self) -> None:
        _require_int("Int64", self.value)
        if not fits_int64(self.value):
            raise ValueError(f"Int64 out of range: {self.value}")
        if fits_int32(self.value):
            raise ValueError(f"Int64 not canonical, {self.value} fits in Int32")


@dataclass(frozen=True)
class Float64(Number):
    """IEEE-754 double. Точность никогда не гарантируется."""

    value: float

    def __post_init__(self) -> None:
        if not isinstance(self.value, float):
            raise TypeError(f"Float64 requires float, got {type(self.value).__name__}")


@dataclass(frozen=True)
class BigInt(Number):
    """Целое произвольной точности вне 64-битного диапазона."""

    value: int

    def __post_init__(self) -> None:
        _require_int("BigInt", self.value)
        if fits_int64(self.value):
            raise ValueError(f"BigInt not canonical, {self.value} fits in Int64")


# Замкнутое множество вариантов и его подмножества (используются в dispatch)
TOWER_TYPES = (Int32, Int64, Float64, BigInt)
INTEGER_TYPES = (Int32, Int64, BigInt)
FIXED_TYPES = (Int32, Int64)


# =============================================================================
# КАНОНИЗАЦИЯ
# =============================================================================


def reduce_64(value: int) -> Union[Int32, Int64]:
    """
    Канонизация 64-битного целого.

    Args:
        value: Целое в диапазоне [INT64_MIN, INT64_MAX]

    Returns:
        Int32 если value помещается в 32 бита, иначе Int64

    Raises:
        ValueError: Если value вне 64-битного диапазона

    Examples:
        >>> reduce_64(7)
        Int32(value=7)
        >>> reduce_64(2**31)
        Int64(value=2147483648)
    """
    if fits_int32(value):
        return Int32(value)
    return Int64(value)


def reduce_big(value: int) -> Union[Int32, Int64, BigInt]:
    """
    Канонизация целого произвольной точности.

    Args:
        value: Любое целое

    Returns:
        reduce_64(value) если value помещается в 64 бита, иначе BigInt

    Examples:
        >>> reduce_big(-5)
        Int32(value=-5)
        >>> reduce_big(2**63)
        BigInt(value=9223372036854775808)
    """
    if fits_int64(value):
        return reduce_64(value)
    return BigInt(value)


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def from_scalar(x: Any) -> Optional[Number]:
    """
    Конверсия нативного скаляра в Number.

    Правила:
    - Number → без изменений
    - int → reduce_big (Int32 / Int64 / BigInt)
    - float → Float64 (даже если значение целое)
    - всё остальное (bool, str, Decimal, Fraction, complex, ...) → None

    Returns:
        Канонический Number или None для неподдерживаемого типа

    Examples:
        >>> from_scalar(1)
        Int32(value=1)
        >>> from_scalar(5.0)
        Float64(value=5.0)
        >>> from_scalar("5") is None
        True
    """
    if isinstance(x, TOWER_TYPES):
        return x
    if isinstance(x, bool):
        return None
    if isinstance(x, int):
        return reduce_big(x)
    if isinstance(x, float):
        return Float64(x)
    return None


# Историческое имя
as_number = from_scalar


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_number(v: Number) -> str:
    """
    Строковое представление Number.

    Целые → десятичные цифры со знаком.
    Float → кратчайшая round-trip запись, всегда с точкой или экспонентой
    (5.0, 1.234, 1e+16); non-finite → inf, -inf, nan.

    Raises:
        UnsupportedOperand: Если v вне numeric tower

    Examples:
        >>> format_number(Float64(5.0))
        '5.0'
        >>> format_number(Int32(-42))
        '-42'
    """
    if isinstance(v, Float64):
        return repr(v.value)
    if isinstance(v, INTEGER_TYPES):
        return str(v.value)
    raise unsupported("format", v)
