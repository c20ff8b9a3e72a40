"""
Magnitude — арифметическое ядро над десятичными разрядами

Модуль работает только с модулями чисел (magnitude), без знака.
Magnitude хранится как list[int] десятичных разрядов, младший разряд первым:
    1234 -> [4, 3, 2, 1]
    0    -> [0]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (на выходе каждой функции):
1. Список никогда не пустой
2. Нет старших нулей, кроме канонического нуля [0]
3. Каждый разряд в диапазоне [0, 9]
4. Входные списки не мутируются (кроме trim_magnitude)

ТРЕБОВАНИЕ К ВХОДУ: аргументы канонические (без старших нулей, непустые).
divmod_magnitude дополнительно нормализует копии входов, поэтому
[0, 0] распознаётся как ноль.

Знак, нормализация нуля и типизированные ошибки для публичного API
обрабатываются в BigInteger (omniint.core.domain.big_integer).
"""

from typing import Final

from omniint.core.errors import DivisionByZero

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления разрядов
DIGIT_BASE: Final[int] = 10

# Максимальное значение одного разряда
MAX_DIGIT: Final[int] = DIGIT_BASE - 1


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def trim_magnitude(digits: list[int]) -> list[int]:
    """
    Удаление старших нулевых разрядов (in place).

    Минимальная длина результата — один разряд, поэтому ноль остаётся [0].

    Args:
        digits: Разряды, младший первым (мутируется)

    Returns:
        Тот же список после обрезки

    Examples:
        >>> trim_magnitude([0, 1, 2, 0, 0])
        [0, 1, 2]
        >>> trim_magnitude([0, 0, 0])
        [0]
    """
    if not digits:
        digits.append(0)
        return digits

    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()

    return digits


def is_zero_magnitude(digits: list[int]) -> bool:
    """Проверка канонического нуля [0]."""
    return len(digits) == 1 and digits[0] == 0


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitude(a: list[int], b: list[int]) -> int:
    """
    Трёхзначное сравнение модулей.

    Длина сравнивается первой: старших нулей нет, значит более длинный
    список — больший модуль. При равной длине разряды сравниваются
    от старшего к младшему.

    Returns:
        -1 если |a| < |b|, 0 если |a| == |b|, +1 если |a| > |b|

    Examples:
        >>> compare_magnitude([1, 2], [9])
        1
        >>> compare_magnitude([3, 2, 1], [4, 2, 1])
        -1
        >>> compare_magnitude([7], [7])
        0
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return 1 if a[i] > b[i] else -1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_magnitude(a: list[int], b: list[int]) -> list[int]:
    """
    Сложение модулей с переносом.

    Цикл идёт, пока остались разряды хотя бы в одном операнде
    или ненулевой перенос.

    Examples:
        >>> add_magnitude([9, 9], [1])
        [0, 0, 1]
    """
    result: list[int] = []
    carry = 0
    i = 0

    while i < len(a) or i < len(b) or carry:
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        result.append(total % DIGIT_BASE)
        carry = total // DIGIT_BASE
        i += 1

    return trim_magnitude(result)


def subtract_magnitude(a: list[int], b: list[int]) -> list[int]:
    """
    Вычитание модулей с заёмом: |a| - |b|.

    Требует |a| >= |b|. Проход идёт по длине более длинного операнда (a),
    отрицательная разность разряда компенсируется +10 и заёмом
    из следующего разряда.

    Args:
        a: Уменьшаемое (|a| >= |b|)
        b: Вычитаемое

    Returns:
        Разряды разности после trim

    Raises:
        ValueError: Если |a| < |b|

    Examples:
        >>> subtract_magnitude([0, 0, 1], [1])
        [9, 9]
        >>> subtract_magnitude([5, 4], [5, 4])
        [0]
    """
    if compare_magnitude(a, b) < 0:
        raise ValueError("subtract_magnitude requires |a| >= |b|")

    result: list[int] = []
    borrow = 0

    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]

        if diff < 0:
            diff += DIGIT_BASE
            borrow = 1
        else:
            borrow = 0

        result.append(diff)

    return trim_magnitude(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitude(a: list[int], b: list[int]) -> list[int]:
    """
    Школьное умножение модулей.

    Алгоритм:
        1. Буфер длины len(a) + len(b), заполненный нулями
        2. Каждое произведение a[i] * b[j] накапливается в позицию i + j
           (временно слот может быть больше 9)
        3. Один проход переноса от младшего слота к старшему,
           с расширением буфера при остаточном переносе

    Examples:
        >>> multiply_magnitude([3, 2, 1], [2])
        [6, 4, 2]
        >>> multiply_magnitude([5], [0])
        [0]
    """
    if is_zero_magnitude(a) or is_zero_magnitude(b):
        return [0]

    result = [0] * (len(a) + len(b))

    for i, digit_a in enumerate(a):
        if digit_a == 0:
            continue
        for j, digit_b in enumerate(b):
            result[i + j] += digit_a * digit_b

    carry = 0
    for k in range(len(result)):
        current = result[k] + carry
        result[k] = current % DIGIT_BASE
        carry = current // DIGIT_BASE

    while carry:
        result.append(carry % DIGIT_BASE)
        carry //= DIGIT_BASE

    return trim_magnitude(result)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def _select_quotient_digit(multiples: list[list[int]], remainder: list[int]) -> int:
    # Наибольший d в [0, 9] с multiples[d] <= remainder; multiples[0] == [0]
    low, high = 0, MAX_DIGIT
    while low < high:
        mid = (low + high + 1) // 2
        if compare_magnitude(multiples[mid], remainder) <= 0:
            low = mid
        else:
            high = mid - 1
    return low


def divmod_magnitude(
    dividend: list[int],
    divisor: list[int],
) -> tuple[list[int], list[int]]:
    """
    Деление модулей столбиком: частное и остаток за один проход.

    Алгоритм (от старшего разряда делимого к младшему):
        r = r * 10 + next_digit
        d = max{d in [0, 9] : d * |divisor| <= r}   (бинарный поиск
            по заранее вычисленным кратным 0x..9x делителя)
        r = r - d * |divisor|
        частное дописывается разрядом d

    Разряды частного появляются старшим первым, поэтому в конце
    разворачиваются в порядок хранения (младший первым).

    Гарантия: dividend == quotient * divisor + remainder, 0 <= remainder < divisor.

    Args:
        dividend: Модуль делимого
        divisor: Модуль делителя

    Returns:
        (quotient, remainder) — новые списки разрядов

    Raises:
        DivisionByZero: Если divisor равен нулю (в любой записи, например [0, 0])

    Examples:
        >>> divmod_magnitude([0, 0, 0, 1], [3, 2, 1])
        ([8], [6, 1])
        >>> divmod_magnitude([5], [7])
        ([0], [5])
    """
    dividend = trim_magnitude(list(dividend))
    divisor = trim_magnitude(list(divisor))

    if is_zero_magnitude(divisor):
        raise DivisionByZero("Division by zero")

    if compare_magnitude(dividend, divisor) < 0:
        return [0], list(dividend)

    multiples = [[0]] + [multiply_magnitude(divisor, [d]) for d in range(1, DIGIT_BASE)]

    remainder = [0]
    quotient_digits: list[int] = []

    for digit in reversed(dividend):
        # Сдвиг на один разряд влево и добавление следующего разряда делимого
        remainder = trim_magnitude([digit] + remainder)

        q_digit = _select_quotient_digit(multiples, remainder)
        if q_digit:
            remainder = subtract_magnitude(remainder, multiples[q_digit])

        quotient_digits.append(q_digit)

    quotient_digits.reverse()
    return trim_magnitude(quotient_digits), remainder
