import functools
from typing import Any

import numpy as np

from scalar_measure.application.character import CharMeasure
from scalar_measure.application.floating import FloatMeasure
from scalar_measure.application.integral import IntegralMeasure
from scalar_measure.config import Settings, load_settings
from scalar_measure.domain import pair_table
from scalar_measure.domain.exceptions import (
    DomainInferenceError,
    UnsupportedDomainError,
)
from scalar_measure.domain.measure import Measure
from scalar_measure.domain.models.domains import (
    CHAR,
    F32,
    F64,
    FIXED_INTEGER_TYPES,
    FLOAT_TYPES,
    INTEGER_TYPES_BY_NAME,
    NOTNAN_F32,
    NOTNAN_F64,
    Domain,
    native_integer,
)
from scalar_measure.domain.models.notnan import NotNan
from scalar_measure.domain.validators import validate_pointer_width
from scalar_measure.logging_config import get_logger

logger = get_logger(__name__)

# Fixed-width domains inferable from a numpy scalar's dtype
_DTYPE_DOMAINS: dict[np.dtype, Domain] = {
    t.dtype: t for t in FIXED_INTEGER_TYPES + (F32, F64)
}


class MeasureRegistry:
    """All measures available for one pointer width, keyed by domain names.

    Measures are built once, up front, from the generated pair table. Looking a
    measure up never derives types at call time.
    """

    def __init__(self, pointer_width: int):
        self.pointer_width = validate_pointer_width(pointer_width)
        self.usize = native_integer(False, self.pointer_width)
        self.isize = native_integer(True, self.pointer_width)

        self.domains: dict[str, Domain] = {
            t.name: t for t in FIXED_INTEGER_TYPES + (self.usize, self.isize)
        }
        self.domains.update({t.name: t for t in FLOAT_TYPES})
        self.domains[CHAR.name] = CHAR

        self._measures: dict[tuple[str, str], Measure] = {}
        self._build_integral_measures()
        for float_type in FLOAT_TYPES:
            self._register(FloatMeasure(float_type))
        self._register(CharMeasure(CHAR))

        logger.debug(
            f"Built {len(self._measures)} measures for pointer width {self.pointer_width}"
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "MeasureRegistry":
        return cls(settings.pointer_width)

    def _build_integral_measures(self) -> None:
        entries = dict(pair_table.FIXED_PAIRS)
        entries.update(pair_table.NATIVE_PAIRS[self.pointer_width])

        for (first, second), (intermediate, length) in entries.items():
            self._register(
                IntegralMeasure(
                    self.domains[first],
                    self.domains[second],
                    intermediate=INTEGER_TYPES_BY_NAME[intermediate],
                    length=INTEGER_TYPES_BY_NAME[length],
                )
            )

    def _register(self, measure: Measure) -> None:
        self._measures[(measure.domain.name, measure.other_domain.name)] = measure

    def domain(self, domain: Domain | str) -> Domain:
        """Resolve a domain name (or descriptor) to this registry's descriptor."""
        name = domain if isinstance(domain, str) else domain.name
        try:
            return self.domains[name]
        except KeyError:
            raise UnsupportedDomainError(
                f"Unknown domain {name!r}. Supported: {', '.join(self.domains)}"
            ) from None

    def measure_for(
        self, domain: Domain | str, other_domain: Domain | str | None = None
    ) -> Measure:
        """Return the measure for an ordered pair of domains.

        Args:
            domain: Domain of the `value` operand (descriptor or name)
            other_domain: Domain of the `other` operand; defaults to `domain`

        Raises:
            UnsupportedDomainError: If either domain is unknown or the pair
                has no measure (e.g. char against an integer)
        """
        first = self.domain(domain)
        second = first if other_domain is None else self.domain(other_domain)
        try:
            return self._measures[(first.name, second.name)]
        except KeyError:
            raise UnsupportedDomainError(
                f"No measure between {first.name} and {second.name}"
            ) from None

    def pairs(self) -> list[tuple[str, str]]:
        return list(self._measures)

    def integral_measures(self) -> list[IntegralMeasure]:
        return [m for m in self._measures.values() if isinstance(m, IntegralMeasure)]

    def infer_domain(self, value: Any) -> Domain:
        """Infer the domain of a value from its type.

        numpy integer and float scalars map onto their fixed-width domain,
        Python floats onto f64, one-character strings onto char and NotNan onto
        the non-NaN domain of its dtype. Python ints carry no width and are
        rejected.

        Raises:
            DomainInferenceError: If the value's type does not identify a domain
        """
        if isinstance(value, NotNan):
            return NOTNAN_F32 if value.value.dtype == np.float32 else NOTNAN_F64
        if isinstance(value, (np.integer, np.floating)):
            try:
                return _DTYPE_DOMAINS[value.dtype]
            except KeyError:
                raise DomainInferenceError(
                    f"No domain for numpy dtype {value.dtype}"
                ) from None
        if isinstance(value, float):
            return F64
        if isinstance(value, str):
            return CHAR
        raise DomainInferenceError(
            f"Cannot infer the domain of {type(value).__name__} {value!r}; "
            "pass the domains explicitly"
        )

    def _typed_domain(self, value: Any) -> Domain | None:
        # Domain carried by a numpy scalar or NotNan, None for other values
        if isinstance(value, NotNan):
            return self.infer_domain(value)
        if isinstance(value, (np.integer, np.floating)):
            return _DTYPE_DOMAINS.get(value.dtype)
        return None

    def distance(self, value: Any, other: Any, domain=None, other_domain=None):
        """Distance between two values, resolving missing domains.

        Without `domain`, both domains are inferred from the operands. With
        `domain` but no `other_domain`, `other` keeps its own domain when it
        is a numpy scalar or NotNan and that pair has a measure (i8 against
        a np.uint8). Otherwise `other` is read as `domain`, so plain Python
        operands share the given domain.
        """
        if domain is None:
            domain = self.infer_domain(value)
            if other_domain is None:
                other_domain = self.infer_domain(other)
        elif other_domain is None:
            inferred = self._typed_domain(other)
            if (
                inferred is not None
                and (self.domain(domain).name, inferred.name) in self._measures
            ):
                other_domain = inferred
        return self.measure_for(domain, other_domain).distance(value, other)

    def length(self, value: Any, domain=None):
        if domain is None:
            domain = self.infer_domain(value)
        return self.measure_for(domain).len(value)


@functools.lru_cache(maxsize=None)
def get_default_registry() -> MeasureRegistry:
    """Registry for the pointer width configured in the environment."""
    return MeasureRegistry.from_settings(load_settings())


def measure_for(domain: Domain | str, other_domain: Domain | str | None = None) -> Measure:
    return get_default_registry().measure_for(domain, other_domain)


def distance(value: Any, other: Any, domain=None, other_domain=None):
    """Distance between two values.

    Without explicit domains, they are inferred from the operands' types:
        distance(np.int8(-5), np.uint8(10)) -> np.uint16(15)
        distance("A", "B") -> np.uint64(1)

    An explicit `domain` applies to `other` too, unless `other` is a numpy
    scalar or NotNan whose own domain pairs with it:
        distance(np.int8(-5), np.uint8(200), domain="i8") -> np.uint16(205)
        distance(5, 10, domain="u8") -> np.uint16(5)
    """
    return get_default_registry().distance(value, other, domain, other_domain)


def length(value: Any, domain=None):
    """Length of a single value, its domain inferred when not given."""
    return get_default_registry().length(value, domain)
