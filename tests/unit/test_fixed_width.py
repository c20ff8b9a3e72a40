"""
Тесты для модели FixedWidth

Проверяет:
1. Границы диапазона для стандартных ширин
2. Pydantic валидацию (bits, name)
3. Immutability (frozen=True) и hashability
"""

import pytest
from pydantic import ValidationError

from omniint import INT8, INT16, INT32, INT64, FixedWidth


class TestFixedWidthBounds:
    """Тесты границ стандартных ширин"""

    def test_int8(self) -> None:
        assert INT8.min_value == -128
        assert INT8.max_value == 127

    def test_int16(self) -> None:
        assert INT16.min_value == -32768
        assert INT16.max_value == 32767

    def test_int32(self) -> None:
        assert INT32.min_value == -2147483648
        assert INT32.max_value == 2147483647

    def test_int64(self) -> None:
        """int64 соответствует long long"""
        assert INT64.min_value == -9223372036854775808
        assert INT64.max_value == 9223372036854775807


class TestFixedWidthValidation:
    """Тесты pydantic валидации"""

    def test_custom_width(self) -> None:
        width = FixedWidth(bits=128, name="int128")
        assert width.max_value == 2**127 - 1

    def test_bits_too_small_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FixedWidth(bits=1, name="int1")

    def test_bits_too_large_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FixedWidth(bits=1024, name="int1024")

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FixedWidth(bits=8, name="")

    def test_frozen(self) -> None:
        """Модель immutable"""
        with pytest.raises(ValidationError):
            INT64.bits = 32

    def test_hashable_and_equal_by_value(self) -> None:
        assert FixedWidth(bits=64, name="int64") == INT64
        assert hash(FixedWidth(bits=64, name="int64")) == hash(INT64)
