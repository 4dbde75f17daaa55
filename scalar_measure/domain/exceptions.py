class MeasureException(Exception):
    """
    Base exception for all measure-related errors.
    """


class ValidationError(MeasureException, ValueError):
    """
    Raised when a value does not belong to the domain it is measured in.
    """


class UnsupportedDomainError(MeasureException, KeyError):
    """
    Raised for an unknown domain name or a domain pair without a measure.
    """

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the plain message instead
        return str(self.args[0]) if self.args else ""


class DomainInferenceError(MeasureException, TypeError):
    """
    Raised when the domain of a value cannot be inferred from its type.
    Pass the domains explicitly to measure_for() instead.
    """


class MeasureOverflowError(MeasureException, ArithmeticError):
    """
    Raised when a result does not fit its Length type.
    Indicates a wrong pair table entry, never a bad input.
    """
