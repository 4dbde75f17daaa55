"""Overflow-free distance and length over scalar domains."""

from scalar_measure.application.registry import (
    MeasureRegistry,
    distance,
    get_default_registry,
    length,
    measure_for,
)
from scalar_measure.domain.measure import Measure
from scalar_measure.domain.models import (
    CHAR,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    ISIZE,
    NOTNAN_F32,
    NOTNAN_F64,
    U8,
    U16,
    U32,
    U64,
    USIZE,
    NotNan,
)

__version__ = "0.1.0"
__all__ = [
    "Measure",
    "MeasureRegistry",
    "NotNan",
    "distance",
    "get_default_registry",
    "length",
    "measure_for",
    "U8", "U16", "U32", "U64",
    "I8", "I16", "I32", "I64",
    "USIZE", "ISIZE",
    "F32", "F64", "NOTNAN_F32", "NOTNAN_F64",
    "CHAR",
]
