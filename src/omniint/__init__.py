"""
OmniInt: Arbitrary Precision Integer Library

Знаковое целое произвольной точности с полной арифметикой, сравнениями
и конверсиями встроенного целого, но без ограничения на модуль.

Examples:
    >>> from omniint import BigInteger, gcd, isqrt
    >>> BigInteger("123456789") * BigInteger("987654321")
    BigInteger('121932631112635269')
    >>> BigInteger(1000) / 123, BigInteger(1000) % 123
    (BigInteger('8'), BigInteger('16'))
    >>> isqrt("98765432109876543210")
    BigInteger('9938079900')
    >>> gcd(-60, 48)
    BigInteger('12')

Errors:
    InvalidFormat, DivisionByZero, DomainError, Overflow (все от OmniIntError)
"""

import logging

from omniint.core.domain import (
    INT8,
    INT16,
    INT32,
    INT64,
    BigInteger,
    FixedWidth,
)
from omniint.core.errors import (
    DivisionByZero,
    DomainError,
    InvalidFormat,
    OmniIntError,
    Overflow,
)
from omniint.core.math.number_theory import gcd, isqrt

# Библиотека молчит, пока приложение не настроит logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Value type
    "BigInteger",
    # Derived algorithms
    "gcd",
    "isqrt",
    # Fixed widths
    "FixedWidth",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    # Errors
    "OmniIntError",
    "InvalidFormat",
    "DivisionByZero",
    "DomainError",
    "Overflow",
]

version = "1.2.1"
