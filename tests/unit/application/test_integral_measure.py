import numpy as np
import pytest

from scalar_measure.application.integral import IntegralMeasure
from scalar_measure.application.registry import MeasureRegistry
from scalar_measure.domain.exceptions import ValidationError
from scalar_measure.domain.models.domains import I8, I16, I64, U8, U16, U64, U128
from scalar_measure.domain.models.uint128 import Uint128


@pytest.fixture(scope="module")
def registry():
    return MeasureRegistry(64)


def test_same_type_unsigned(registry):
    result = registry.measure_for(U8).distance(5, 10)
    assert result == 5
    assert type(result) is np.uint16


def test_mixed_sign_8_bit(registry):
    result = registry.measure_for(I8, U8).distance(-5, 10)
    assert result == 15
    assert type(result) is np.uint16


def test_accepts_numpy_operands(registry):
    result = registry.measure_for(I8, U8).distance(np.int8(-5), np.uint8(10))
    assert result == np.uint16(15)


@pytest.mark.parametrize(
    "first,second,intermediate,length",
    [
        ("u8", "u8", "u8", "u16"),
        ("i8", "i8", "i16", "u8"),
        ("u8", "i8", "i16", "u16"),
        ("u8", "i16", "i32", "u16"),
        ("u16", "i8", "i32", "u32"),
        ("u32", "i64", "i128", "u64"),
        ("u64", "i64", "i128", "u128"),
        ("i64", "i64", "i128", "u64"),
    ],
)
def test_pair_types(registry, first, second, intermediate, length):
    measure = registry.measure_for(first, second)
    assert isinstance(measure, IntegralMeasure)
    assert measure.intermediate.name == intermediate
    assert measure.length_type.name == length


def test_i64_extremes_do_not_wrap(registry):
    measure = registry.measure_for(I64)
    result = measure.distance(I64.min_value, I64.max_value)
    assert result == 2**64 - 1
    assert type(result) is np.uint64


def test_u64_against_i64_needs_128_bits(registry):
    measure = registry.measure_for(U64, I64)
    result = measure.distance(U64.max_value, I64.min_value)
    assert result == (2**64 - 1) + 2**63
    assert type(result) is Uint128
    assert measure.zero() == 0


def test_i8_full_span_fits_u8(registry):
    result = registry.measure_for(I8).distance(127, -128)
    assert result == 255
    assert type(result) is np.uint8


def test_len_is_one_in_length_type(registry):
    measure = registry.measure_for(I16, U8)
    assert measure.len(-300) == 1
    assert type(measure.len(-300)) is np.uint16
    assert measure.len(-300) == measure.len(32767)


def test_len_of_128_bit_length(registry):
    assert registry.measure_for(U64).len(0) == 1
    assert registry.measure_for(U64).length_type == U128


def test_operands_are_validated_against_their_own_domain(registry):
    measure = registry.measure_for(U8, I16)
    with pytest.raises(ValidationError, match="out of u8 range"):
        measure.distance(-1, 0)
    assert measure.distance(0, -1) == 1


def test_zero_and_length_algebra(registry):
    measure = registry.measure_for(U16)
    total = measure.zero() + measure.distance(1, 4) + measure.len(0)
    assert total == np.uint32(4)
    assert total - measure.len(0) == 3


def test_repr(registry):
    assert repr(registry.measure_for(U8, I8)) == "IntegralMeasure(u8, i8 -> u16)"


def test_identity_returns_zero(registry):
    measure = registry.measure_for(U16)
    assert measure.distance(U16.max_value, U16.max_value) == measure.zero()


@pytest.mark.parametrize("domain", [U16, U64])
def test_length_algebra_wraps_at_every_width(registry, domain):
    measure = registry.measure_for(domain)
    modulus = 1 << measure.length_type.bits
    span = measure.distance(0, domain.max_value)
    with np.errstate(over="ignore"):
        wrapped = measure.zero() - span
        assert wrapped == modulus - domain.max_value
        assert wrapped + span == measure.zero()
    assert type(wrapped) is type(measure.zero())
