"""
Core math modules для OmniInt

Арифметика над модулями (magnitude) в виде списков десятичных разрядов.

number_theory (isqrt, gcd) намеренно не реэкспортируется здесь:
он зависит от BigInteger, а BigInteger зависит от этого пакета.
Импортируйте его как omniint.core.math.number_theory или из omniint.
"""

from omniint.core.math.magnitude import (
    # Constants
    DIGIT_BASE,
    MAX_DIGIT,
    # Normalization
    is_zero_magnitude,
    trim_magnitude,
    # Comparison
    compare_magnitude,
    # Arithmetic
    add_magnitude,
    divmod_magnitude,
    multiply_magnitude,
    subtract_magnitude,
)

__all__ = [
    # Magnitude — Constants
    "DIGIT_BASE",
    "MAX_DIGIT",
    # Magnitude — Normalization
    "is_zero_magnitude",
    "trim_magnitude",
    # Magnitude — Comparison
    "compare_magnitude",
    # Magnitude — Arithmetic
    "add_magnitude",
    "divmod_magnitude",
    "multiply_magnitude",
    "subtract_magnitude",
]
