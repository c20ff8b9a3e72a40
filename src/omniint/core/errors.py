"""
Errors — типизированные ошибки арифметики OmniInt

Каждый вид ошибки — отдельный класс, чтобы вызывающий код мог
ветвиться по типу ошибки. Дополнительно каждый класс наследует
подходящее встроенное исключение Python (ValueError, ZeroDivisionError,
OverflowError), поэтому стандартные обработчики продолжают работать.

Ошибки никогда не подавляются и не заменяются fallback-значением:
все они пропагируют к непосредственному вызывающему коду.
"""


class OmniIntError(Exception):
    """Базовый класс всех ошибок OmniInt."""


class InvalidFormat(OmniIntError, ValueError):
    """
    Текст не соответствует грамматике ['+' | '-'] digit+.

    Возникает при пустой строке, при строке из одного знака
    и при любом нецифровом символе после необязательного знака.
    """


class DivisionByZero(OmniIntError, ZeroDivisionError):
    """Модуль делителя равен нулю (деление или остаток)."""


class DomainError(OmniIntError, ValueError):
    """Аргумент вне области определения (isqrt от отрицательного числа)."""


class Overflow(OmniIntError, OverflowError):
    """Значение не помещается в целевой fixed-width тип."""
