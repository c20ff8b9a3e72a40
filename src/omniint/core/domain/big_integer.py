"""
BigInteger — знаковое целое произвольной точности

Value type с неограниченным модулем: арифметика, сравнения и конверсии
как у встроенного целого.

Представление:
- _digits: десятичные разряды модуля, младший первым (list[int])
- _non_negative: True для нуля и положительных чисел

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после каждой публичной операции):
1. _digits не пустой
2. Нет старших нулей, кроме канонического нуля [0]
3. Ноль всегда неотрицательный (нет "-0")
4. Каждый разряд в диапазоне [0, 9]

Из инвариантов следует каноническая форма: структурное равенство
(_digits, _non_negative) эквивалентно числовому равенству.

Семантика деления — truncating (округление частного к нулю):
    a == (a / b) * b + a % b,  sign(a % b) == sign(a) или a % b == 0
Операторы / и // оба дают truncating частное, % — остаток со знаком делимого.
Частное и остаток всегда получаются из одного вызова divide_and_remainder.

Мутация — только через in-place операторы (+=, -=, ...) и
increment/decrement; операнд при этом никогда не мутируется.
"""

import logging
from functools import lru_cache
from typing import Final

from omniint.core.domain.fixed_width import INT64, FixedWidth
from omniint.core.errors import InvalidFormat, Overflow
from omniint.core.math.magnitude import (
    DIGIT_BASE,
    add_magnitude,
    compare_magnitude,
    divmod_magnitude,
    is_zero_magnitude,
    multiply_magnitude,
    subtract_magnitude,
    trim_magnitude,
)

logger = logging.getLogger(__name__)

# Допустимые символы разрядов в каноническом тексте
DECIMAL_DIGITS: Final[str] = "0123456789"


# =============================================================================
# ПАРСИНГ И КОНСТРУИРОВАНИЕ РАЗРЯДОВ
# =============================================================================


def _digits_from_int(value: int) -> tuple[list[int], bool]:
    # int в Python не ограничен, поэтому модуль берётся напрямую
    non_negative = value >= 0
    remaining = value if non_negative else -value

    if remaining == 0:
        return [0], True

    digits: list[int] = []
    while remaining > 0:
        digits.append(remaining % DIGIT_BASE)
        remaining //= DIGIT_BASE

    return digits, non_negative


def _parse_decimal(text: str) -> tuple[list[int], bool]:
    """
    Разбор текста по грамматике ['+' | '-'] digit+.

    Разряды в тексте идут старшим первым, в хранилище — младшим первым.

    Raises:
        InvalidFormat: Пустая строка, одиночный знак или нецифровой символ
    """
    if not text:
        raise InvalidFormat("Invalid string for BigInteger: empty input")

    start = 0
    non_negative = True
    if text[0] in "+-":
        non_negative = text[0] == "+"
        start = 1

    if start == len(text):
        raise InvalidFormat(f"Invalid string for BigInteger: sign without digits, got {text!r}")

    body = text[start:]
    for ch in body:
        if ch not in DECIMAL_DIGITS:
            raise InvalidFormat(
                f"Invalid character {ch!r} in string for BigInteger, got {text!r}"
            )

    return [ord(ch) - ord("0") for ch in reversed(body)], non_negative


# =============================================================================
# BIG INTEGER
# =============================================================================


class BigInteger:
    """
    Знаковое целое произвольной точности.

    Конструирование:
        BigInteger()            -> 0
        BigInteger(-42)         -> из int
        BigInteger("+00100")    -> из текста ['+' | '-'] digit+ (-> 100)
        BigInteger(other)       -> независимая копия

    Examples:
        >>> BigInteger("12345678901234567890") + 54321
        BigInteger('12345678901234622211')
        >>> str(BigInteger(-10) % 3)
        '-1'
    """

    def __init__(self, value: "BigInteger | int | str" = 0) -> None:
        if isinstance(value, BigInteger):
            digits, non_negative = list(value._digits), value._non_negative
        elif isinstance(value, int):
            digits, non_negative = _digits_from_int(value)
        elif isinstance(value, str):
            digits, non_negative = _parse_decimal(value)
        else:
            raise TypeError(
                f"BigInteger expects BigInteger, int or str, got {type(value).__name__}"
            )

        self._digits: list[int] = digits
        self._non_negative: bool = non_negative
        self._normalize()

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """Конструирование из int."""
        if not isinstance(value, int):
            raise TypeError(f"from_int expects int, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def from_string(cls, text: str) -> "BigInteger":
        """
        Конструирование из десятичного текста.

        Raises:
            InvalidFormat: Если text не соответствует ['+' | '-'] digit+
        """
        if not isinstance(text, str):
            raise TypeError(f"from_string expects str, got {type(text).__name__}")
        return cls(text)

    @classmethod
    def power_of_ten(cls, exponent: int) -> "BigInteger":
        """
        10 ** exponent без арифметики над большими числами.

        Examples:
            >>> BigInteger.power_of_ten(3)
            BigInteger('1000')
        """
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")
        return cls._from_parts([0] * exponent + [1], True)

    @classmethod
    def _from_parts(cls, digits: list[int], non_negative: bool) -> "BigInteger":
        # digits передаётся во владение новому объекту
        result = cls.__new__(cls)
        result._digits = digits
        result._non_negative = non_negative
        result._normalize()
        return result

    # -------------------------------------------------------------------------
    # Нормализация
    # -------------------------------------------------------------------------

    def _normalize(self) -> None:
        trim_magnitude(self._digits)
        if is_zero_magnitude(self._digits):
            self._non_negative = True

    def _assign(self, other: "BigInteger") -> "BigInteger":
        # other: свежий результат операции, разряды не разделяются с операндами
        self._digits = other._digits
        self._non_negative = other._non_negative
        return self

    @staticmethod
    def _coerce(value: object) -> "BigInteger | None":
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, int):
            return BigInteger(value)
        return None

    @classmethod
    def _require(cls, value: object) -> "BigInteger":
        coerced = cls._coerce(value)
        if coerced is None:
            raise TypeError(f"Expected BigInteger or int operand, got {type(value).__name__}")
        return coerced

    # -------------------------------------------------------------------------
    # Наблюдаемое состояние
    # -------------------------------------------------------------------------

    @property
    def magnitude(self) -> tuple[int, ...]:
        """Разряды модуля, младший первым (read-only копия)."""
        return tuple(self._digits)

    @property
    def is_non_negative(self) -> bool:
        return self._non_negative

    def is_zero(self) -> bool:
        return is_zero_magnitude(self._digits)

    def is_negative(self) -> bool:
        return not self._non_negative

    def is_even(self) -> bool:
        return self._digits[0] % 2 == 0

    def digit_count(self) -> int:
        """Число десятичных разрядов без знака; у нуля — 1."""
        return len(self._digits)

    # -------------------------------------------------------------------------
    # Рендеринг
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Каноническая десятичная запись.

        Ноль -> "0"; иначе необязательный '-' и разряды старшим первым,
        без ведущих нулей и без '+'.
        """
        if self.is_zero():
            return "0"
        body = "".join(DECIMAL_DIGITS[d] for d in reversed(self._digits))
        return body if self._non_negative else "-" + body

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "BigInteger | int") -> int:
        """
        Трёхзначное сравнение знаковых значений.

        Порядок проверок:
            1. Разные знаки -> неотрицательное больше (ноль неотрицательный)
            2. Оба нуля -> равны независимо от хранимого знака
            3. Модули (длина, затем разряды от старшего)
            4. Для двух отрицательных результат сравнения модулей инвертируется

        Returns:
            -1, 0 или +1
        """
        other = self._require(other)

        self_zero = self.is_zero()
        other_zero = other.is_zero()
        self_non_negative = self._non_negative or self_zero
        other_non_negative = other._non_negative or other_zero

        if self_non_negative != other_non_negative:
            return 1 if self_non_negative else -1

        if self_zero and other_zero:
            return 0

        raw = compare_magnitude(self._digits, other._digits)
        return raw if self_non_negative else -raw

    def __eq__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) == 0

    def __ne__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) != 0

    def __lt__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) < 0

    def __le__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) <= 0

    def __gt__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) > 0

    def __ge__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) >= 0

    def __hash__(self) -> int:
        # Согласовано с равенством против int: BigInteger(5) == 5
        return hash(int(self))

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------------------------------------------------------------------------
    # Унарные операции
    # -------------------------------------------------------------------------

    def negate(self) -> "BigInteger":
        """Противоположное значение; для нуля — ноль (нет "-0")."""
        if self.is_zero():
            return BigInteger._from_parts([0], True)
        return BigInteger._from_parts(list(self._digits), not self._non_negative)

    def absolute(self) -> "BigInteger":
        return BigInteger._from_parts(list(self._digits), True)

    def copy(self) -> "BigInteger":
        """Независимая копия (собственное хранилище разрядов)."""
        return BigInteger._from_parts(list(self._digits), self._non_negative)

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __abs__(self) -> "BigInteger":
        return self.absolute()

    def __copy__(self) -> "BigInteger":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigInteger":
        return self.copy()

    # -------------------------------------------------------------------------
    # Аддитивное ядро
    # -------------------------------------------------------------------------

    def add(self, other: "BigInteger | int") -> "BigInteger":
        """
        Сумма self + other.

        Одинаковые знаки -> сложение модулей, знак общий.
        Разные знаки -> разность модулей (больший минус меньший),
        знак операнда с большим модулем.
        """
        other = self._require(other)

        if self._non_negative == other._non_negative:
            return BigInteger._from_parts(
                add_magnitude(self._digits, other._digits), self._non_negative
            )

        if compare_magnitude(self._digits, other._digits) >= 0:
            return BigInteger._from_parts(
                subtract_magnitude(self._digits, other._digits), self._non_negative
            )

        return BigInteger._from_parts(
            subtract_magnitude(other._digits, self._digits), other._non_negative
        )

    def subtract(self, other: "BigInteger | int") -> "BigInteger":
        """
        Разность self - other.

        Разные знаки -> self + (-other).
        Одинаковые знаки и |self| < |other| -> -(|other| - |self|),
        чтобы цепочка заёмов всегда шла от большего модуля.
        """
        other = self._require(other)

        if self._non_negative != other._non_negative:
            return self.add(other.negate())

        if compare_magnitude(self._digits, other._digits) < 0:
            return BigInteger._from_parts(
                subtract_magnitude(other._digits, self._digits), not self._non_negative
            )

        return BigInteger._from_parts(
            subtract_magnitude(self._digits, other._digits), self._non_negative
        )

    def __add__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.add(coerced)

    def __radd__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.add(self)

    def __sub__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.subtract(coerced)

    def __rsub__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.subtract(self)

    # -------------------------------------------------------------------------
    # Мультипликативное ядро
    # -------------------------------------------------------------------------

    def multiply(self, other: "BigInteger | int") -> "BigInteger":
        """Произведение; знак — XOR знаков операндов."""
        other = self._require(other)
        return BigInteger._from_parts(
            multiply_magnitude(self._digits, other._digits),
            self._non_negative == other._non_negative,
        )

    def __mul__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.multiply(coerced)

    def __rmul__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.multiply(self)

    # -------------------------------------------------------------------------
    # Деление
    # -------------------------------------------------------------------------

    def divide_and_remainder(
        self, other: "BigInteger | int"
    ) -> tuple["BigInteger", "BigInteger"]:
        """
        Частное и остаток за один проход деления столбиком.

        Truncating семантика:
            - знак частного — XOR знаков (нулевое частное неотрицательно)
            - знак остатка — знак делимого (нулевой остаток неотрицателен)
            - self == q * other + r, |r| < |other|

        Returns:
            (quotient, remainder)

        Raises:
            DivisionByZero: Если other == 0

        Examples:
            >>> BigInteger(1000).divide_and_remainder(123)
            (BigInteger('8'), BigInteger('16'))
            >>> BigInteger(10).divide_and_remainder(-3)
            (BigInteger('-3'), BigInteger('1'))
        """
        other = self._require(other)

        quotient_digits, remainder_digits = divmod_magnitude(self._digits, other._digits)

        quotient = BigInteger._from_parts(
            quotient_digits, self._non_negative == other._non_negative
        )
        remainder = BigInteger._from_parts(remainder_digits, self._non_negative)
        return quotient, remainder

    def divide(self, other: "BigInteger | int") -> "BigInteger":
        """Truncating частное (проекция divide_and_remainder)."""
        return self.divide_and_remainder(other)[0]

    def remainder(self, other: "BigInteger | int") -> "BigInteger":
        """Остаток со знаком делимого (проекция divide_and_remainder)."""
        return self.divide_and_remainder(other)[1]

    def __truediv__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.divide(coerced)

    def __rtruediv__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.divide(self)

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.remainder(coerced)

    def __rmod__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.remainder(self)

    def __divmod__(self, other: object) -> tuple["BigInteger", "BigInteger"]:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.divide_and_remainder(coerced)

    def __rdivmod__(self, other: object) -> tuple["BigInteger", "BigInteger"]:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.divide_and_remainder(self)

    # -------------------------------------------------------------------------
    # In-place операции (мутируют только self)
    # -------------------------------------------------------------------------

    def __iadd__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self._assign(self.add(coerced))

    def __isub__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self._assign(self.subtract(coerced))

    def __imul__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self._assign(self.multiply(coerced))

    def __itruediv__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self._assign(self.divide(coerced))

    __ifloordiv__ = __itruediv__

    def __imod__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self._assign(self.remainder(coerced))

    def increment(self) -> "BigInteger":
        """Префиксный ++: мутирует self и возвращает его."""
        return self._assign(self.add(1))

    def decrement(self) -> "BigInteger":
        """Префиксный --: мутирует self и возвращает его."""
        return self._assign(self.subtract(1))

    def post_increment(self) -> "BigInteger":
        """Постфиксный ++: мутирует self, возвращает копию прежнего значения."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "BigInteger":
        """Постфиксный --: мутирует self, возвращает копию прежнего значения."""
        previous = self.copy()
        self.decrement()
        return previous

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def _accumulate(self) -> int:
        # Разряды старшим первым: acc = acc * 10 + digit
        accumulator = 0
        for digit in reversed(self._digits):
            accumulator = accumulator * DIGIT_BASE + digit
        return accumulator if self._non_negative else -accumulator

    def to_fixed_width(self, width: FixedWidth = INT64) -> int:
        """
        Конверсия в fixed-width знаковое целое с проверкой переполнения.

        Граничные значения сравниваются как BigInteger: эвристика по числу
        разрядов недостаточна рядом с границей (9223372036854775807 и
        9223372036854775808 имеют по 19 разрядов).

        Args:
            width: Целевой тип (default: INT64)

        Returns:
            Значение как int в диапазоне [width.min_value, width.max_value]

        Raises:
            Overflow: Если значение вне диапазона width
        """
        low, high = _width_bounds(width)

        if self < low or self > high:
            logger.debug("to_fixed_width overflow: value=%s width=%s", self, width.name)
            raise Overflow(
                f"BigInteger value {self} out of range for {width.name} "
                f"[{width.min_value}, {width.max_value}]"
            )

        return self._accumulate()

    def __int__(self) -> int:
        return self._accumulate()


@lru_cache(maxsize=None)
def _width_bounds(width: FixedWidth) -> tuple[BigInteger, BigInteger]:
    # Кэшируются только внутренние экземпляры, наружу не отдаются
    return BigInteger(width.min_value), BigInteger(width.max_value)
