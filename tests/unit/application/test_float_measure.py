import warnings

import numpy as np
import pytest

from scalar_measure.application.floating import FloatMeasure
from scalar_measure.domain.exceptions import ValidationError
from scalar_measure.domain.models.domains import F32, F64, NOTNAN_F32, NOTNAN_F64
from scalar_measure.domain.models.notnan import NotNan


@pytest.fixture
def f64():
    return FloatMeasure(F64)


@pytest.fixture
def f32():
    return FloatMeasure(F32)


def test_absolute_difference(f64):
    assert f64.distance(1.5, -2.0) == 3.5
    assert f64.distance(-2.0, 1.5) == 3.5


def test_signed_zeros(f64):
    result = f64.distance(0.0, -0.0)
    assert result == 0.0
    assert not np.signbit(result)


@pytest.mark.parametrize(
    "a,b",
    [
        (np.inf, 0.0),
        (-np.inf, 0.0),
        (1e308, np.inf),
        (np.inf, np.inf),
        (-np.inf, -np.inf),
        (np.inf, -np.inf),
    ],
)
def test_infinity_is_infinitely_far(f64, a, b):
    assert f64.distance(a, b) == np.inf
    assert f64.distance(b, a) == np.inf


def test_result_keeps_domain_precision(f32):
    result = f32.distance(1.0, 0.25)
    assert type(result) is np.float32
    assert result == np.float32(0.75)


def test_overflow_saturates_without_warning(f32):
    big = np.finfo(np.float32).max
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = f32.distance(big, -big)
    assert result == np.float32(np.inf)


def test_nan_propagates(f64):
    assert np.isnan(f64.distance(np.nan, 1.0))
    assert np.isnan(f64.distance(1.0, np.nan))


def test_infinity_wins_over_nan(f64):
    assert f64.distance(np.inf, np.nan) == np.inf


def test_len_is_positive_zero(f32):
    assert f32.len(123.0) == 0.0
    assert f32.len(-np.inf) == f32.zero()
    assert not np.signbit(f32.len(-1.0))


def test_not_nan_distance():
    measure = FloatMeasure(NOTNAN_F64)
    result = measure.distance(NotNan.of(1.0), NotNan.of(3.5))
    assert result == NotNan.of(2.5)
    assert measure.distance(NotNan.of(np.inf), NotNan.of(np.inf)) == NotNan.of(np.inf)
    assert measure.len(NotNan.of(7.0)) == measure.zero() == NotNan.of(0.0)


def test_not_nan_keeps_precision():
    measure = FloatMeasure(NOTNAN_F32)
    result = measure.distance(1.0, 0.5)
    assert isinstance(result, NotNan)
    assert result.value.dtype == np.float32


def test_not_nan_rejects_nan_operands():
    measure = FloatMeasure(NOTNAN_F32)
    with pytest.raises(ValidationError):
        measure.distance(np.nan, 1.0)


def test_oversized_python_int_saturates(f32):
    assert f32.distance(10**400, 0) == np.inf
    assert f32.distance(0, -(10**400)) == np.inf
    assert F32.coerce(-(10**400)) == np.float32(-np.inf)
    assert type(F64.coerce(10**400)) is np.float64


def test_oversized_python_int_in_not_nan_domain():
    measure = FloatMeasure(NOTNAN_F64)
    assert measure.distance(10**400, 1.0) == NotNan.of(np.inf)
