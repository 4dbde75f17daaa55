from dataclasses import dataclass, fields
from typing import Any

import numpy as np

from .notnan import NotNan


class BaseModel:
    def to_dict(self):
        """Converts a dataclass instance to a dictionary of plain Python values,
        unwrapping numpy scalars and NotNan lengths.
        """
        result = {}
        for f in fields(self):
            value = self._convert_value(getattr(self, f.name))
            result[f.name] = value
        return result

    def _convert_value(self, value: Any) -> Any:
        if hasattr(value, "to_dict"):
            return value.to_dict()
        if isinstance(value, NotNan):
            return float(value)
        if isinstance(value, np.generic):
            return value.item()
        if isinstance(value, (list, tuple)):
            return [self._convert_value(v) for v in value]
        return value


@dataclass(slots=True)
class MeasureResult(BaseModel):
    """Outcome of a single len/distance evaluation."""

    operation: str
    domains: tuple[str, ...]
    operands: tuple[Any, ...]
    value: Any
    length_type: str
