"""
Domain models and value objects.

Contains the BigInteger value type and FixedWidth conversion targets.
"""

from omniint.core.domain.big_integer import DECIMAL_DIGITS, BigInteger
from omniint.core.domain.fixed_width import (
    INT8,
    INT16,
    INT32,
    INT64,
    FixedWidth,
)

__all__ = [
    # BigInteger
    "BigInteger",
    "DECIMAL_DIGITS",
    # Fixed widths
    "FixedWidth",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
]
