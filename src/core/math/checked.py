"""
Checked — Overflow-checked 64-битная арифметика и widening в float

Модуль эмулирует машинную 64-битную арифметику (two's-complement
wraparound) и детектирует overflow ДО того, как он испортит результат:
- add_fixed64: классический sign-тест overflow
- sub_fixed64: через add_fixed64(a, -b), кроме b == INT64_MIN
- mul_fixed64: всегда через точное произведение + reduce_big

При overflow вычисление повторяется в произвольной точности (Python int)
и результат оборачивается в BigInt.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Overflow 64-битного add/sub всегда даёт BigInt (значение вне INT64)
2. Результат без overflow канонизируется через reduce_64
"""

import logging
import math
from typing import Union

from src.core.math.limits import INT64_MAX, INT64_MIN, UINT64_MASK
from src.core.math.tower import (
    BigInt,
    Float64,
    Int32,
    Int64,
    Number,
    reduce_64,
    reduce_big,
    unsupported,
)

logger = logging.getLogger(__name__)

IntResult = Union[Int32, Int64, BigInt]


# =============================================================================
# WRAPAROUND
# =============================================================================


def wrap64(value: int) -> int:
    """
    Two's-complement wraparound в signed 64-битный диапазон.

    Examples:
        >>> wrap64(2**63)
        -9223372036854775808
        >>> wrap64(-1)
        -1
    """
    value &= UINT64_MASK
    if value > INT64_MAX:
        # Старший бит установлен → отрицательное значение
        return value - UINT64_MASK - 1
    return value


# =============================================================================
# OVERFLOW-CHECKED ОПЕРАЦИИ
# =============================================================================


def add_fixed64(a: int, b: int) -> IntResult:
    """
    Сложение 64-битных целых с детекцией overflow.

    Overflow: знаки a и b совпадают, а знак wrapped суммы отличается.

    Args:
        a: Целое в диапазоне INT64
        b: Целое в диапазоне INT64

    Returns:
        BigInt(a + b) при overflow, иначе reduce_64(wrap64(a + b))

    Examples:
        >>> add_fixed64(2**63 - 1, 1)
        BigInt(value=9223372036854775808)
        >>> add_fixed64(2**31 - 1, 1)
        Int64(value=2147483648)
    """
    c = wrap64(a + b)
    if (a >= 0 and b >= 0 and c < 0) or (a < 0 and b < 0 and c >= 0):
        logger.debug("int64 add overflow: %d + %d promoted to BigInt", a, b)
        return BigInt(a + b)
    return reduce_64(c)


def sub_fixed64(a: int, b: int) -> IntResult:
    """
    Вычитание 64-битных целых с детекцией overflow.

    -INT64_MIN не представимо в 64 битах, поэтому b == INT64_MIN
    обрабатывается отдельно:
    - a < 0: a - INT64_MIN не переполняется → прямое вычисление
    - a >= 0: результат > INT64_MAX → BigInt

    Examples:
        >>> sub_fixed64(-1, -(2**63))
        Int64(value=9223372036854775807)
        >>> sub_fixed64(0, -(2**63))
        BigInt(value=9223372036854775808)
    """
    if b != INT64_MIN:
        return add_fixed64(a, -b)
    if a < 0:
        return reduce_64(wrap64(a - b))
    logger.debug("int64 sub overflow: %d - %d promoted to BigInt", a, b)
    return BigInt(a - b)


def mul_fixed64(a: int, b: int) -> IntResult:
    """
    Умножение 64-битных целых.

    Всегда через точное произведение (без inline детекции overflow).
    """
    return reduce_big(a * b)


# =============================================================================
# WIDENING В FLOAT
# =============================================================================


def big_to_float(value: int) -> float:
    """
    Ближайший float64 для целого произвольной точности.

    Значения вне диапазона float дают ±inf (не ошибка).

    Examples:
        >>> big_to_float(2**53 + 1)
        9007199254740992.0
        >>> big_to_float(10**400)
        inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def to_float(v: Number) -> float:
    """
    Widening любого варианта в float.

    Raises:
        UnsupportedOperand: Если v вне numeric tower
    """
    if isinstance(v, Float64):
        return v.value
    if isinstance(v, (Int32, Int64)):
        return float(v.value)
    if isinstance(v, BigInt):
        return big_to_float(v.value)
    raise unsupported("to_float", v)
