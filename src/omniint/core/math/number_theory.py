"""
Number Theory — производные алгоритмы над BigInteger

- isqrt: целочисленный квадратный корень (Ньютон от переоценки)
- gcd: наибольший общий делитель (алгоритм Евклида)

Оба алгоритма используют только публичную арифметику BigInteger
и опираются на инварианты деления:
    0 <= |a % b| < |b|,  a == (a / b) * b + a % b

ФОРМУЛЫ:
    x_0 = 10 ** ceil(digits(n) / 2)        (переоценка: x_0 >= sqrt(n))
    x_{k+1} = (x_k + n / x_k) / 2          (целочисленное деление)
    gcd(a, b) = gcd(b, a mod b),  gcd(a, 0) = |a|
"""

import logging

from omniint.core.domain.big_integer import BigInteger
from omniint.core.errors import DomainError

logger = logging.getLogger(__name__)


def _as_big_integer(value: "BigInteger | int | str") -> BigInteger:
    if isinstance(value, BigInteger):
        return value
    return BigInteger(value)


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЙ КВАДРАТНЫЙ КОРЕНЬ
# =============================================================================


def isqrt(value: "BigInteger | int | str") -> BigInteger:
    """
    Целочисленный квадратный корень: floor(sqrt(n)).

    Алгоритм:
        1. Начальное приближение 10 ** ceil(d / 2), где d — число разрядов n.
           Корень d-разрядного числа имеет не более ceil(d / 2) разрядов,
           поэтому приближение не меньше истинного корня.
        2. Итерация Ньютона, пока последовательность строго убывает.
           От переоценки последовательность монотонно не возрастает
           до неподвижной точки, поэтому остановка безопасна.
        3. Пост-коррекция: если x * x > n, x уменьшается на единицу.

    Args:
        value: Неотрицательное значение (BigInteger, int или десятичный текст)

    Returns:
        Новый BigInteger r, такой что r * r <= n < (r + 1) * (r + 1)

    Raises:
        DomainError: Если value < 0
        InvalidFormat: Если value — невалидный текст

    Examples:
        >>> isqrt(99)
        BigInteger('9')
        >>> isqrt("98765432109876543210")
        BigInteger('9938079900')
    """
    n = _as_big_integer(value)

    if n.is_negative():
        raise DomainError(f"Cannot compute square root of a negative number, got {n}")

    if n.is_zero():
        return BigInteger(0)

    x = BigInteger.power_of_ten((n.digit_count() + 1) // 2)
    iterations = 0

    while True:
        next_x = (x + n / x) / 2
        iterations += 1
        if next_x >= x:
            break
        x = next_x

    corrected = False
    if x * x > n:
        x = x - 1
        corrected = True

    logger.debug(
        "isqrt: digits=%d iterations=%d corrected=%s",
        n.digit_count(),
        iterations,
        corrected,
    )
    return x


# =============================================================================
# НАИБОЛЬШИЙ ОБЩИЙ ДЕЛИТЕЛЬ
# =============================================================================


def gcd(a: "BigInteger | int | str", b: "BigInteger | int | str") -> BigInteger:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Работает с модулями входов, поэтому результат всегда >= 0.
    gcd(0, 0) == 0. Завершение гарантировано строгим убыванием |b|:
    остаток деления меньше делителя по модулю.

    Examples:
        >>> gcd(60, 48)
        BigInteger('12')
        >>> gcd(-60, 48)
        BigInteger('12')
        >>> gcd(0, 0)
        BigInteger('0')
    """
    x = abs(_as_big_integer(a))
    y = abs(_as_big_integer(b))
    steps = 0

    while not y.is_zero():
        x, y = y, x % y
        steps += 1

    logger.debug("gcd: steps=%d result_digits=%d", steps, x.digit_count())
    return x
