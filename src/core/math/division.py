"""
Division — Truncating quotient/remainder и rounded quotient

Две семантики деления:
- quo_rem: усечение к нулю (как машинное целочисленное деление),
  знак остатка совпадает со знаком делимого. НЕ floored division.
- rquo: истинное (не усечённое) частное, всегда Float64.

Float ветка quo_rem:
    quotient  = trunc(a / b)
    remainder = fmod(a, b)
Конечное целое частное с |q| <= 2**53 переводится в точное целое
(Int32 / Int64 / BigInt), чтобы повторное деление float без дробной части
не накапливало ошибку частного.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. a == quotient * b + remainder для целых операндов
2. remainder == 0 или sign(remainder) == sign(a)
3. Целочисленный делитель 0 → DivisionByZero
4. Float делитель 0 → IEEE-754 (±inf / NaN), НЕ ошибка
"""

import logging
import math
from typing import NamedTuple

from src.core.math.checked import to_float
from src.core.math.limits import MAX_EXACT_FLOAT_INT
from src.core.math.tower import (
    INTEGER_TYPES,
    DivisionByZero,
    Float64,
    Int32,
    Number,
    reduce_64,
    reduce_big,
    require_operands,
)

logger = logging.getLogger(__name__)


class QuoRem(NamedTuple):
    """Результат quo_rem: частное и остаток."""

    quotient: Number
    remainder: Number


# =============================================================================
# IEEE-754 ПРИМИТИВЫ
# =============================================================================


def ieee_div(x: float, y: float) -> float:
    """
    Деление float по IEEE-754 (без ZeroDivisionError).

    Examples:
        >>> ieee_div(1.0, 0.0)
        inf
        >>> ieee_div(-1.0, 0.0)
        -inf
        >>> ieee_div(1.0, -0.0)
        -inf
    """
    if y == 0.0:
        if x == 0.0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def ieee_fmod(x: float, y: float) -> float:
    """
    Остаток fmod по IEEE-754: знак совпадает со знаком x.

    fmod(±inf, y) и fmod(x, 0) дают NaN (без ValueError).
    """
    if math.isnan(x) or math.isnan(y) or math.isinf(x) or y == 0.0:
        return math.nan
    return math.fmod(x, y)


def trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """
    Целочисленное деление с усечением к нулю.

    Python // — floored division, поэтому знак частного восстанавливается
    из модулей.

    Examples:
        >>> trunc_divmod(-13, 4)
        (-3, -1)
        >>> trunc_divmod(13, -4)
        (-3, 1)
    """
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


# =============================================================================
# QUO_REM
# =============================================================================


def _float_quo_rem(x: float, y: float) -> QuoRem:
    q = ieee_div(x, y)
    r = Float64(ieee_fmod(x, y))

    if not math.isfinite(q):
        return QuoRem(Float64(q), r)

    whole = math.trunc(q)
    if abs(whole) > MAX_EXACT_FLOAT_INT:
        # Выше 2**53 float уже не точен, частное остаётся Float64
        return QuoRem(Float64(float(whole)), r)

    logger.debug("float quotient %r re-expressed as exact integer %d", q, whole)
    return QuoRem(reduce_big(whole), r)


def quo_rem(a: Number, b: Number) -> QuoRem:
    """
    Частное и остаток с усечением к нулю.

    Целые операнды → точное деление, оба результата канонизированы.
    Участвует Float64 → float ветка (остаток всегда Float64).

    Args:
        a: Делимое
        b: Делитель

    Returns:
        QuoRem(quotient, remainder)

    Raises:
        UnsupportedOperand: Если операнд вне numeric tower
        DivisionByZero: Если оба операнда целые и делитель равен 0

    Examples:
        >>> quo_rem(Int32(-13), Int32(4))
        QuoRem(quotient=Int32(value=-3), remainder=Int32(value=-1))
        >>> quo_rem(Float64(13.0), Float64(4.0))
        QuoRem(quotient=Int32(value=3), remainder=Float64(value=1.0))
    """
    require_operands("quo_rem", a, b)

    if isinstance(a, INTEGER_TYPES) and isinstance(b, INTEGER_TYPES):
        if b.value == 0:
            raise DivisionByZero(f"quo_rem: integer division by zero ({a} / 0)")
        q, r = trunc_divmod(a.value, b.value)
        if isinstance(a, Int32) and isinstance(b, Int32):
            # INT32_MIN / -1 выходит за Int32, но всегда помещается в 64 бита
            return QuoRem(reduce_64(q), reduce_64(r))
        return QuoRem(reduce_big(q), reduce_big(r))

    return _float_quo_rem(to_float(a), to_float(b))


# =============================================================================
# RQUO
# =============================================================================


def rquo(a: Number, b: Number) -> Float64:
    """
    Rounded (истинное) частное a / b, всегда Float64.

    Оба операнда приводятся к float; деление на ноль следует IEEE-754.

    Raises:
        UnsupportedOperand: Если операнд вне numeric tower

    Examples:
        >>> rquo(Int32(7), Int32(2))
        Float64(value=3.5)
        >>> rquo(Int32(1), Int32(0))
        Float64(value=inf)
    """
    require_operands("rquo", a, b)
    return Float64(ieee_div(to_float(a), to_float(b)))
