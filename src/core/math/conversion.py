"""
Conversion — Number → machine integer с флагом точности

Разрядность machine word задаётся явно (MachineWord), поэтому результат
не зависит от платформы.

Правила:
- Int32   → всегда точно
- Int64   → точно, если помещается в слово; иначе clamp к min/max по знаку
- Float64 → усечённое значение, exact=False ВСЕГДА (float не сертифицируется)
- BigInt  → Int64 правило, если помещается в 64 бита; иначе clamp по знаку
"""

import math
from typing import NamedTuple

from src.core.math.limits import DEFAULT_MACHINE_WORD, MachineWord, fits_int64
from src.core.math.tower import BigInt, Float64, Int32, Int64, Number, unsupported


class MachineInt(NamedTuple):
    """Результат to_machine_int: значение и флаг точности."""

    value: int
    exact: bool


def _clamp_by_sign(value: int, word: MachineWord) -> MachineInt:
    return MachineInt(word.min if value < 0 else word.max, False)


def _fixed_to_machine_int(value: int, word: MachineWord) -> MachineInt:
    if word.fits(value):
        return MachineInt(value, True)
    return _clamp_by_sign(value, word)


def _float_to_machine_int(value: float, word: MachineWord) -> MachineInt:
    if math.isnan(value):
        return MachineInt(0, False)
    if math.isinf(value):
        return MachineInt(word.max if value > 0 else word.min, False)
    whole = math.trunc(value)
    if word.fits(whole):
        return MachineInt(whole, False)
    return _clamp_by_sign(whole, word)


def to_machine_int(v: Number, word: MachineWord = DEFAULT_MACHINE_WORD) -> MachineInt:
    """
    Конверсия Number в machine integer.

    Args:
        v: Конвертируемое значение
        word: Разрядность machine word (default: 64 бита)

    Returns:
        MachineInt(value, exact):
            - value: целое в диапазоне [word.min, word.max]
            - exact: False если конверсия потеряла информацию

    Raises:
        UnsupportedOperand: Если v вне numeric tower

    Examples:
        >>> to_machine_int(Int32(7))
        MachineInt(value=7, exact=True)
        >>> to_machine_int(Float64(3.0))
        MachineInt(value=3, exact=False)
        >>> to_machine_int(Int64(2**40), MachineWord(bits=32))
        MachineInt(value=2147483647, exact=False)
    """
    if isinstance(v, Int32):
        return _fixed_to_machine_int(v.value, word)
    if isinstance(v, Int64):
        return _fixed_to_machine_int(v.value, word)
    if isinstance(v, Float64):
        return _float_to_machine_int(v.value, word)
    if isinstance(v, BigInt):
        if fits_int64(v.value):
            return _fixed_to_machine_int(v.value, word)
        return _clamp_by_sign(v.value, word)
    raise unsupported("to_machine_int", v)
