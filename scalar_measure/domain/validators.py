"""Input validation utilities for measured values."""

import numbers

import numpy as np

from scalar_measure.domain.constants import (
    MAX_CODEPOINT,
    SUPPORTED_POINTER_WIDTHS,
    SURROGATE_END,
    SURROGATE_START,
)
from scalar_measure.domain.exceptions import ValidationError
from scalar_measure.domain.units import Codepoint, PointerWidth


def validate_integer(value, name: str, min_value: int, max_value: int) -> int:
    """Validate an integer operand against the range of its domain.

    Args:
        value: Python int or numpy integer scalar
        name: Domain name for error messages
        min_value: Smallest value of the domain
        max_value: Largest value of the domain

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If the value is not an integer or is out of range
    """
    # bool is an int subclass, but never a member of an integer domain
    if isinstance(value, (bool, np.bool_)) or not isinstance(
        value, (int, np.integer)
    ):
        raise ValidationError(f"{name} value must be an integer, got {type(value)}")

    value = int(value)
    if not min_value <= value <= max_value:
        raise ValidationError(
            f"Value {value} is out of {name} range [{min_value}, {max_value}]"
        )
    return value


def validate_real(value, name: str) -> None:
    """Validate that a float operand is a real number.

    Args:
        value: Operand to check
        name: Domain name for error messages

    Raises:
        ValidationError: If the value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(
        value, (numbers.Real, np.floating, np.integer)
    ):
        raise ValidationError(f"{name} value must be a real number, got {type(value)}")


def validate_not_nan(value) -> None:
    """Reject NaN.

    Raises:
        ValidationError: If the value is NaN
    """
    if np.isnan(value):
        raise ValidationError("NotNan value must not be NaN")


def validate_scalar_value(value) -> Codepoint:
    """Validate a character operand and return its codepoint.

    Args:
        value: A one-character string

    Returns:
        The codepoint of the character

    Raises:
        ValidationError: If the value is not a single Unicode scalar value

    Note:
        Python strings may hold lone surrogates ("\\ud800"). These are not
        scalar values and are rejected.
    """
    if not isinstance(value, str) or len(value) != 1:
        raise ValidationError(
            f"char value must be a one-character string, got {value!r}"
        )

    codepoint = ord(value)
    if SURROGATE_START <= codepoint <= SURROGATE_END:
        raise ValidationError(
            f"U+{codepoint:04X} is a surrogate, not a Unicode scalar value"
        )
    if codepoint > MAX_CODEPOINT:
        raise ValidationError(f"U+{codepoint:04X} is beyond U+{MAX_CODEPOINT:X}")
    return Codepoint(codepoint)


def validate_pointer_width(width: int) -> PointerWidth:
    """Validate a pointer width for platform-native integers.

    Raises:
        ValidationError: If the width is not one of the supported widths
    """
    if width not in SUPPORTED_POINTER_WIDTHS:
        raise ValidationError(
            f"Unsupported pointer width {width}. "
            f"Must be one of {list(SUPPORTED_POINTER_WIDTHS)}"
        )
    return PointerWidth(width)
