# scalar_measure/domain/units.py
"""
Type-safe aliases for the raw numbers flowing through the measures.

Usage:
    from scalar_measure.domain.units import BitWidth, Codepoint

    def gap_span(low: Codepoint, high: Codepoint) -> int:
        ...
"""

from typing import NewType

# Base numeric types
BitWidth = NewType("BitWidth", int)  # Width of an integer type in bits
Codepoint = NewType("Codepoint", int)  # Unicode scalar value as an integer

# Semantic types
PointerWidth = NewType("PointerWidth", BitWidth)  # Width of usize/isize
