from scalar_measure.domain.constants import UNIT
from scalar_measure.domain.measure import Measure
from scalar_measure.domain.models.domains import IntegerType


class IntegralMeasure(Measure):
    """Distance between two integers, possibly of different width and sign.

    Both operands are cast into `intermediate`, a type wide enough to hold
    either operand's range, the smaller is subtracted from the larger, and the
    difference is converted into `length`. The types come from the generated
    pair table.
    """

    def __init__(
        self,
        domain: IntegerType,
        other_domain: IntegerType,
        intermediate: IntegerType,
        length: IntegerType,
    ):
        super().__init__(domain, other_domain)
        self.intermediate = intermediate
        self.length = length

    @property
    def length_type(self) -> IntegerType:
        return self.length

    def len(self, value):
        self.domain.coerce(value)
        return self.length.convert(UNIT)

    def distance(self, value, other):
        a = self.intermediate.wrap(self.domain.coerce(value))
        b = self.intermediate.wrap(self.other_domain.coerce(other))

        if a > b:
            difference = a - b
        else:
            difference = b - a
        return self.length.convert(difference)
