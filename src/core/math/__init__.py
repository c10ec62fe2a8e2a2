"""
Core math modules для numeric tower

Замкнутое множество числовых представлений (Int32, Int64, Float64, BigInt)
с автоматическим promotion при overflow и канонизацией к самому узкому
точному варианту.
"""

# Limits & configuration
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

# Variants, construction, canonicalization
from src.core.math.tower import (
    BigInt,
    DivisionByZero,
    Float64,
    Int32,
    Int64,
    Number,
    NumericError,
    UnsupportedOperand,
    as_number,
    format_number,
    from_scalar,
    reduce_64,
    reduce_big,
)

# Overflow-checked 64-bit arithmetic
from src.core.math.checked import (
    add_fixed64,
    big_to_float,
    mul_fixed64,
    sub_fixed64,
    to_float,
    wrap64,
)

# Dispatch matrix
from src.core.math.arithmetic import add, cmp, mul, sub

# Division
from src.core.math.division import QuoRem, quo_rem, rquo, trunc_divmod

# Machine integer conversion
from src.core.math.conversion import MachineInt, to_machine_int

__all__ = [
    # Limits — Constants
    "DEFAULT_MACHINE_WORD",
    "DEFAULT_MACHINE_WORD_BITS",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "MACHINE_INT_MAX",
    "MACHINE_INT_MIN",
    "MAX_EXACT_FLOAT_INT",
    # Limits — Types
    "MachineWord",
    # Limits — Functions
    "fits_int32",
    "fits_int64",
    # Tower — Exceptions
    "NumericError",
    "UnsupportedOperand",
    "DivisionByZero",
    # Tower — Types
    "Number",
    "Int32",
    "Int64",
    "Float64",
    "BigInt",
    # Tower — Functions
    "as_number",
    "format_number",
    "from_scalar",
    "reduce_64",
    "reduce_big",
    # Checked — Functions
    "add_fixed64",
    "big_to_float",
    "mul_fixed64",
    "sub_fixed64",
    "to_float",
    "wrap64",
    # Arithmetic — Functions
    "add",
    "cmp",
    "mul",
    "sub",
    # Division — Types
    "QuoRem",
    # Division — Functions
    "quo_rem",
    "rquo",
    "trunc_divmod",
    # Conversion — Types
    "MachineInt",
    # Conversion — Functions
    "to_machine_int",
]
