# scalar_measure/domain/models/__init__.py
from .notnan import NotNan
from .uint128 import Uint128
from .domains import (
    CHAR,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    NOTNAN_F32,
    NOTNAN_F64,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    CharType,
    Domain,
    FloatType,
    IntegerType,
)
from .result import MeasureResult

__all__ = [
    "NotNan",
    "Uint128",
    "CharType",
    "Domain",
    "FloatType",
    "IntegerType",
    "MeasureResult",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "USIZE",
    "ISIZE",
    "F32",
    "F64",
    "NOTNAN_F32",
    "NOTNAN_F64",
    "CHAR",
]
