"""
FixedWidth — описание целевого fixed-width знакового типа

Immutable Pydantic модель для narrow conversion (BigInteger.to_fixed_width).
Диапазон знакового типа из bits бит (дополнительный код):
    min_value = -2 ** (bits - 1)
    max_value =  2 ** (bits - 1) - 1
"""

from typing import Final

from pydantic import BaseModel, Field


class FixedWidth(BaseModel):
    """
    Знаковый целочисленный тип фиксированной ширины.

    Immutable модель (frozen=True), поэтому hashable и может
    использоваться как ключ кэша граничных значений.
    """

    bits: int = Field(..., ge=2, le=512, description="Ширина типа в битах")
    name: str = Field(..., min_length=1, description="Имя типа (например, 'int64')")

    model_config = {"frozen": True}

    @property
    def min_value(self) -> int:
        """Минимальное представимое значение."""
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        """Максимальное представимое значение."""
        return (1 << (self.bits - 1)) - 1


# =============================================================================
# СТАНДАРТНЫЕ ШИРИНЫ
# =============================================================================

INT8: Final[FixedWidth] = FixedWidth(bits=8, name="int8")
INT16: Final[FixedWidth] = FixedWidth(bits=16, name="int16")
INT32: Final[FixedWidth] = FixedWidth(bits=32, name="int32")
INT64: Final[FixedWidth] = FixedWidth(bits=64, name="int64")  # long long
