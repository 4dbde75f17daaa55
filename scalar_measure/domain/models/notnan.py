from dataclasses import dataclass

import numpy as np

from scalar_measure.domain.validators import validate_not_nan


@dataclass(frozen=True, slots=True, order=True)
class NotNan:
    """A numpy float scalar guaranteed not to be NaN.

    Arithmetic that would produce NaN (e.g. inf - inf) raises ValidationError
    instead of yielding an invalid NotNan.
    """

    value: np.floating

    def __post_init__(self):
        if not isinstance(self.value, np.floating):
            object.__setattr__(self, "value", np.float64(self.value))
        validate_not_nan(self.value)

    @classmethod
    def of(cls, value, dtype=np.float64) -> "NotNan":
        return cls(np.dtype(dtype).type(value))

    def __add__(self, other: "NotNan") -> "NotNan":
        if not isinstance(other, NotNan):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return NotNan(self.value + other.value)

    def __sub__(self, other: "NotNan") -> "NotNan":
        if not isinstance(other, NotNan):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return NotNan(self.value - other.value)

    def __float__(self) -> float:
        return float(self.value)

    def __repr__(self) -> str:
        return f"NotNan({self.value!r})"
