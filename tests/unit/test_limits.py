"""
Тесты для Limits — границы и MachineWord

Проверяет:
1. Значения fixed-width границ
2. Валидацию и immutability MachineWord
3. Range predicates
"""

import pytest
from pydantic import ValidationError

from src.core.math.limits import (
    DEFAULT_MACHINE_WORD,
    DEFAULT_MACHINE_WORD_BITS,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    MACHINE_INT_MAX,
    MACHINE_INT_MIN,
    MAX_EXACT_FLOAT_INT,
    MachineWord,
    fits_int32,
    fits_int64,
)


class TestConstants:
    """Тесты констант"""

    def test_fixed_width_bounds(self) -> None:
        """Границы соответствуют two's-complement"""
        assert INT32_MIN == -2147483648
        assert INT32_MAX == 2147483647
        assert INT64_MIN == -9223372036854775808
        assert INT64_MAX == 9223372036854775807

    def test_machine_int_bounds_match_default_word(self) -> None:
        """MACHINE_INT_* совпадают с default MachineWord"""
        assert DEFAULT_MACHINE_WORD.bits == DEFAULT_MACHINE_WORD_BITS == 64
        assert DEFAULT_MACHINE_WORD.min == MACHINE_INT_MIN
        assert DEFAULT_MACHINE_WORD.max == MACHINE_INT_MAX

    def test_max_exact_float_int(self) -> None:
        """2**53 — последнее целое без потерь в float"""
        assert float(MAX_EXACT_FLOAT_INT) == MAX_EXACT_FLOAT_INT
        assert float(MAX_EXACT_FLOAT_INT + 1) != MAX_EXACT_FLOAT_INT + 1


class TestMachineWord:
    """Тесты MachineWord"""

    def test_default_bits(self) -> None:
        """По умолчанию 64 бита"""
        assert MachineWord().bits == 64

    def test_32_bit_word(self) -> None:
        """32-битное слово"""
        word = MachineWord(bits=32)
        assert word.min == INT32_MIN
        assert word.max == INT32_MAX

    @pytest.mark.parametrize("bits", [0, 8, 16, 48, 128])
    def test_invalid_bits_rejected(self, bits: int) -> None:
        """Поддерживаются только 32 и 64"""
        with pytest.raises(ValidationError, match="must be 32 or 64"):
            MachineWord(bits=bits)

    def test_frozen(self) -> None:
        """MachineWord immutable"""
        word = MachineWord()
        with pytest.raises(ValidationError):
            word.bits = 32  # type: ignore[misc]

    def test_fits(self) -> None:
        """fits проверяет диапазон слова"""
        word = MachineWord(bits=32)
        assert word.fits(INT32_MAX)
        assert not word.fits(INT32_MAX + 1)
        assert DEFAULT_MACHINE_WORD.fits(INT32_MAX + 1)
        assert not DEFAULT_MACHINE_WORD.fits(INT64_MIN - 1)


class TestRangePredicates:
    """Тесты fits_int32 / fits_int64"""

    def test_fits_int32(self) -> None:
        """Границы INT32 включены"""
        assert fits_int32(INT32_MIN)
        assert fits_int32(INT32_MAX)
        assert not fits_int32(INT32_MIN - 1)
        assert not fits_int32(INT32_MAX + 1)

    def test_fits_int64(self) -> None:
        """Границы INT64 включены"""
        assert fits_int64(INT64_MIN)
        assert fits_int64(INT64_MAX)
        assert not fits_int64(INT64_MIN - 1)
        assert not fits_int64(INT64_MAX + 1)
