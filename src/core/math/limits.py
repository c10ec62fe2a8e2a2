"""
Limits — Границы fixed-width представлений и конфигурация machine word

Модуль задаёт все числовые границы numeric tower:
- INT32 / INT64 диапазоны (канонизация Int32 → Int64 → BigInt)
- Границу точного представления целых в float (2**53)
- MachineWord — явная конфигурация разрядности machine integer

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Разрядность machine word всегда передаётся явно (не зависит от платформы)
2. Допустимы только 32- и 64-битные machine words
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# FIXED-WIDTH ГРАНИЦЫ
# =============================================================================

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Маска для эмуляции 64-битного two's-complement wraparound
UINT64_MASK: Final[int] = 2**64 - 1

# Максимальное целое, которое float64 хранит без потери точности (53-bit mantissa)
MAX_EXACT_FLOAT_INT: Final[int] = 2**53


# =============================================================================
# MACHINE WORD
# =============================================================================

DEFAULT_MACHINE_WORD_BITS: Final[int] = 64

# Границы machine word по умолчанию (используются clamp-правилом to_machine_int)
MACHINE_INT_MIN: Final[int] = INT64_MIN
MACHINE_INT_MAX: Final[int] = INT64_MAX


class MachineWord(BaseModel):
    """
    Конфигурация разрядности machine integer.

    Immutable модель (frozen=True). Используется в to_machine_int вместо
    неявной платформенной разрядности, чтобы результат был воспроизводим.
    """

    bits: int = Field(
        default=DEFAULT_MACHINE_WORD_BITS,
        description="Разрядность signed machine integer (32 или 64)",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("bits")
    @classmethod
    def validate_bits(cls, v: int) -> int:
        """Поддерживаются только 32- и 64-битные слова."""
        if v not in (32, 64):
            raise ValueError(f"machine word bits must be 32 or 64, got {v}")
        return v

    @property
    def min(self) -> int:
        """Минимальное signed значение слова."""
        return -(1 << (self.bits - 1))

    @property
    def max(self) -> int:
        """Максимальное signed значение слова."""
        return (1 << (self.bits - 1)) - 1

    def fits(self, value: int) -> bool:
        """True если value помещается в слово без потерь."""
        return self.min <= value <= self.max


DEFAULT_MACHINE_WORD: Final[MachineWord] = MachineWord(bits=DEFAULT_MACHINE_WORD_BITS)


# =============================================================================
# RANGE PREDICATES
# =============================================================================


def fits_int32(value: int) -> bool:
    """True если value в диапазоне [INT32_MIN, INT32_MAX]."""
    return INT32_MIN <= value <= INT32_MAX


def fits_int64(value: int) -> bool:
    """True если value в диапазоне [INT64_MIN, INT64_MAX]."""
    return INT64_MIN <= value <= INT64_MAX
