"""Descriptors of the scalar domains a measure can operate on."""

from dataclasses import dataclass

import numpy as np

from scalar_measure.domain.constants import INTEGER_WIDTHS, LENGTH_WIDTHS
from scalar_measure.domain.exceptions import MeasureOverflowError
from scalar_measure.domain.models.notnan import NotNan
from scalar_measure.domain.models.uint128 import Uint128
from scalar_measure.domain.units import BitWidth, Codepoint
from scalar_measure.domain.validators import (
    validate_integer,
    validate_real,
    validate_scalar_value,
)


@dataclass(frozen=True, slots=True)
class IntegerType:
    """Fixed-width two's complement integer type.

    Widths up to 64 bits map onto a numpy dtype. The 128-bit types only exist
    as intermediates and lengths: i128 values are plain Python ints, u128
    values are Uint128 ints that wrap modulo 2**128 like numpy unsigned
    scalars.
    """

    name: str
    bits: BitWidth
    signed: bool
    native: bool = False

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def dtype(self) -> np.dtype | None:
        if self.bits > 64:
            return None
        return np.dtype(f"{'i' if self.signed else 'u'}{self.bits // 8}")

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def wrap(self, value: int) -> int:
        """Reinterpret the low `bits` bits of value, like a C or `as` cast."""
        value &= (1 << self.bits) - 1
        if self.signed and value > self.max_value:
            value -= 1 << self.bits
        return value

    def convert(self, value: int):
        """Checked conversion of a Python int into this type.

        Raises:
            MeasureOverflowError: If the value does not fit
        """
        if not self.contains(value):
            raise MeasureOverflowError(
                f"{value} does not fit {self.name} "
                f"[{self.min_value}, {self.max_value}]"
            )
        dtype = self.dtype
        if dtype is not None:
            return dtype.type(value)
        return value if self.signed else Uint128(value)

    def coerce(self, value) -> int:
        return validate_integer(value, self.name, self.min_value, self.max_value)

    def zero(self):
        return self.convert(0)


@dataclass(frozen=True, slots=True)
class FloatType:
    """IEEE binary floating-point type, optionally restricted to non-NaN values."""

    name: str
    bits: BitWidth
    not_nan: bool = False

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(f"f{self.bits // 8}")

    def coerce(self, value):
        """Convert an operand into this type.

        Returns a numpy float scalar, or a NotNan for non-NaN types.
        """
        if isinstance(value, NotNan):
            value = value.value
        validate_real(value, self.name)
        try:
            with np.errstate(over="ignore"):
                scalar = self.dtype.type(value)
        except OverflowError:
            # Python ints beyond the float range saturate, like floats do
            scalar = self.dtype.type(np.inf if value > 0 else -np.inf)
        return NotNan(scalar) if self.not_nan else scalar

    def zero(self):
        scalar = self.dtype.type(0.0)
        return NotNan(scalar) if self.not_nan else scalar

    def infinity(self):
        scalar = self.dtype.type(np.inf)
        return NotNan(scalar) if self.not_nan else scalar


@dataclass(frozen=True, slots=True)
class CharType:
    """Unicode scalar values, U+0000..U+10FFFF without the surrogate block."""

    name: str = "char"
    bits: BitWidth = BitWidth(32)

    def coerce(self, value) -> Codepoint:
        return validate_scalar_value(value)


Domain = IntegerType | FloatType | CharType


def unsigned(bits: int) -> IntegerType:
    return IntegerType(f"u{bits}", BitWidth(bits), signed=False)


def signed(bits: int) -> IntegerType:
    return IntegerType(f"i{bits}", BitWidth(bits), signed=True)


def native_integer(is_signed: bool, pointer_width: int) -> IntegerType:
    """Build usize/isize for the given pointer width."""
    return IntegerType(
        "isize" if is_signed else "usize",
        BitWidth(pointer_width),
        signed=is_signed,
        native=True,
    )


U8, U16, U32, U64, U128 = (unsigned(bits) for bits in LENGTH_WIDTHS)
I8, I16, I32, I64, I128 = (signed(bits) for bits in LENGTH_WIDTHS)

F32 = FloatType("f32", BitWidth(32))
F64 = FloatType("f64", BitWidth(64))
NOTNAN_F32 = FloatType("notnan_f32", BitWidth(32), not_nan=True)
NOTNAN_F64 = FloatType("notnan_f64", BitWidth(64), not_nan=True)

CHAR = CharType()

# Platform-native integers at the interpreter's own pointer width. A registry
# built for another width carries its own usize/isize under the same names.
NATIVE_POINTER_WIDTH = np.dtype(np.uintp).itemsize * 8
USIZE = native_integer(False, NATIVE_POINTER_WIDTH)
ISIZE = native_integer(True, NATIVE_POINTER_WIDTH)

FIXED_INTEGER_TYPES: tuple[IntegerType, ...] = tuple(
    [unsigned(bits) for bits in INTEGER_WIDTHS] + [signed(bits) for bits in INTEGER_WIDTHS]
)
FLOAT_TYPES: tuple[FloatType, ...] = (F32, F64, NOTNAN_F32, NOTNAN_F64)

# Every integer type by name, intermediates and lengths included
INTEGER_TYPES_BY_NAME: dict[str, IntegerType] = {
    t.name: t for t in (U8, U16, U32, U64, U128, I8, I16, I32, I64, I128)
}
