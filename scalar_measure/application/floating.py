import numpy as np

from scalar_measure.domain.measure import Measure
from scalar_measure.domain.models.domains import FloatType
from scalar_measure.domain.models.notnan import NotNan


class FloatMeasure(Measure):
    """Distance between IEEE floats of one precision.

    A single point has no extent, so len() is +0.0. Any infinite operand puts
    the other one infinitely far away. Finite differences are computed in the
    domain's own dtype and saturate to +inf when they overflow.

    NaN operands propagate: the distance is NaN. Non-NaN domains reject NaN
    when their operands are coerced.
    """

    def __init__(self, domain: FloatType):
        super().__init__(domain)

    @property
    def length_type(self) -> FloatType:
        return self.domain

    def len(self, value):
        self.domain.coerce(value)
        return self.domain.zero()

    def distance(self, value, other):
        a = self._raw(self.domain.coerce(value))
        b = self._raw(self.domain.coerce(other))

        if np.isinf(a) or np.isinf(b):
            return self.domain.infinity()

        with np.errstate(over="ignore", invalid="ignore"):
            difference = np.abs(a - b)
        return NotNan(difference) if self.domain.not_nan else difference

    @staticmethod
    def _raw(value) -> np.floating:
        return value.value if isinstance(value, NotNan) else value
