"""
Arithmetic — Mixed-type dispatch matrix для add / sub / mul / cmp

Для каждой операции 16 (4×4) комбинаций типов разбиты на классы:
- Int32 × Int32            → точный результат (≤ 64 бит) + reduce_64
- Int32/Int64 × Int32/Int64 → overflow-checked 64-битная операция
- целое × Float64 (и наоборот) → float арифметика, результат Float64
- Float64 × BigInt (и наоборот) → BigInt в ближайший float (может быть ±inf)
- целое × BigInt, BigInt × BigInt → точная арифметика + reduce_big
- всё остальное → UnsupportedOperand

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый целочисленный результат канонизирован
2. Float результат никогда не сводится к целому (даже если целый)
3. Операнды никогда не модифицируются
"""

import operator
from typing import Callable

from src.core.math.checked import (
    add_fixed64,
    mul_fixed64,
    sub_fixed64,
    to_float,
)
from src.core.math.tower import (
    FIXED_TYPES,
    Float64,
    Int32,
    Number,
    reduce_64,
    reduce_big,
    require_operands,
)

FixedOp = Callable[[int, int], Number]
ExactOp = Callable[[int, int], int]
FloatOp = Callable[[float, float], float]


# =============================================================================
# DISPATCH
# =============================================================================


def _dispatch(
    operation: str,
    a: Number,
    b: Number,
    fixed_op: FixedOp,
    exact_op: ExactOp,
    float_op: FloatOp,
) -> Number:
    """
    Общая 4×4 матрица для add / sub / mul.

    Args:
        operation: Имя операции (для сообщения об ошибке)
        fixed_op: Overflow-checked 64-битная операция
        exact_op: Точная целочисленная операция (произвольная точность)
        float_op: IEEE-754 операция над float
    """
    require_operands(operation, a, b)

    if isinstance(a, Int32) and isinstance(b, Int32):
        # Два 32-битных операнда: результат всегда помещается в 64 бита
        return reduce_64(exact_op(a.value, b.value))

    if isinstance(a, FIXED_TYPES) and isinstance(b, FIXED_TYPES):
        return fixed_op(a.value, b.value)

    if isinstance(a, Float64) or isinstance(b, Float64):
        return Float64(float_op(to_float(a), to_float(b)))

    # Остались целые пары с хотя бы одним BigInt
    return reduce_big(exact_op(a.value, b.value))


# =============================================================================
# ADD / SUB / MUL
# =============================================================================


def add(a: Number, b: Number) -> Number:
    """
    Сумма a + b.

    Raises:
        UnsupportedOperand: Если операнд вне numeric tower

    Examples:
        >>> add(Int32(2**31 - 1), Int32(1))
        Int64(value=2147483648)
        >>> add(Int32(1), Float64(0.5))
        Float64(value=1.5)
    """
    return _dispatch("add", a, b, add_fixed64, operator.add, operator.add)


def sub(a: Number, b: Number) -> Number:
    """
    Разность a - b.

    Raises:
        UnsupportedOperand: Если операнд вне numeric tower
    """
    return _dispatch("sub", a, b, sub_fixed64, operator.sub, operator.sub)


def mul(a: Number, b: Number) -> Number:
    """
    Произведение a * b.

    Raises:
        UnsupportedOperand: Если операнд вне numeric tower
    """
    return _dispatch("mul", a, b, mul_fixed64, operator.mul, operator.mul)


# =============================================================================
# CMP
# =============================================================================


def _sign_of_order(x, y) -> int:
    if x < y:
        return -1
    elif x > y:
        return 1
    else:
        return 0


def cmp(a: Number, b: Number) -> int:
    """
    Сравнение по значению (не по представлению).

    Returns:
        -1 если a < b
         0 если a == b (или хотя бы один операнд NaN)
        +1 если a > b

    ВАЖНО: если участвует Float64, второй операнд приводится к ближайшему
    float — различные большие целые могут оказаться равными.
    Целые пары сравниваются точно.

    Raises:
        UnsupportedOperand: Если операнд вне numeric tower
    """
    require_operands("cmp", a, b)

    if isinstance(a, Float64) or isinstance(b, Float64):
        return _sign_of_order(to_float(a), to_float(b))

    return _sign_of_order(a.value, b.value)
