import numpy as np

from scalar_measure.domain.constants import ABOVE_GAP, BELOW_GAP, GAP_ANCHOR, UNIT
from scalar_measure.domain.measure import Measure
from scalar_measure.domain.models.domains import U64, CharType, IntegerType
from scalar_measure.domain.units import Codepoint


def codepoint_distance(a: Codepoint, b: Codepoint) -> int:
    """Distance between two Unicode scalar values given as codepoints.

    A span that crosses the surrogate block is measured as
    (high - 0xD000 + 1) + (0xD7FF - low).
    """
    low, high = (a, b) if a <= b else (b, a)

    if low <= BELOW_GAP and high >= ABOVE_GAP:
        return (high - GAP_ANCHOR + 1) + (BELOW_GAP - low)
    return high - low


class CharMeasure(Measure):
    """Distance between Unicode scalar values (one-character strings)."""

    def __init__(self, domain: CharType):
        super().__init__(domain)

    @property
    def length_type(self) -> IntegerType:
        return U64

    def len(self, value) -> np.uint64:
        self.domain.coerce(value)
        return np.uint64(UNIT)

    def distance(self, value, other) -> np.uint64:
        return np.uint64(
            codepoint_distance(self.domain.coerce(value), self.domain.coerce(other))
        )
