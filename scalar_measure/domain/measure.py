from abc import ABC, abstractmethod
from typing import Any

from scalar_measure.domain.models.domains import Domain, FloatType, IntegerType


class Measure(ABC):
    """
    Distance between singletons of a scalar domain.

    A measure is bound to an ordered pair of domains: `value` arguments belong
    to `domain`, `other` arguments to `other_domain`. Results are Length values
    of `length_type`, which supports a zero value, `+`, `-` and `==`.

    Guarantees of every implementation:
        distance(a, b) == distance(b, a)
        distance(a, a) == zero()
        distance never overflows or wraps
        len(a) does not depend on a
    """

    def __init__(self, domain: Domain, other_domain: Domain | None = None):
        self.domain = domain
        self.other_domain = other_domain if other_domain is not None else domain

    @property
    @abstractmethod
    def length_type(self) -> IntegerType | FloatType:
        """The type of the values returned by len() and distance()."""
        pass

    def zero(self) -> Any:
        """The default (zero) Length value."""
        return self.length_type.zero()

    @abstractmethod
    def len(self, value: Any) -> Any:
        """
        Return the length of the given element.
        This method must be implemented by subclasses.
        """
        pass

    @abstractmethod
    def distance(self, value: Any, other: Any) -> Any:
        """
        Return the distance between value and other.
        This method must be implemented by subclasses.
        """
        pass

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.domain.name}, {self.other_domain.name}"
            f" -> {self.length_type.name})"
        )
