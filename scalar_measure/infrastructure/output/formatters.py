"""Output formatting for CLI results."""

import json
from typing import Protocol

from scalar_measure.domain.models.result import MeasureResult


def _format_operand(value) -> str:
    if isinstance(value, str):
        return f"{value!r} (U+{ord(value):04X})"
    return str(value)


def _build_output_dict(result: MeasureResult) -> dict:
    output_dict = result.to_dict()
    # JSON has no representation for inf/nan, nor for integers past 2**53 in
    # most consumers
    value = output_dict["value"]
    if isinstance(value, float) and value != value:
        output_dict["value"] = "nan"
    elif isinstance(value, float) and value in (float("inf"), float("-inf")):
        output_dict["value"] = "inf" if value > 0 else "-inf"
    elif isinstance(value, int) and abs(value) > 2**53:
        output_dict["value"] = str(value)
    output_dict["operands"] = [
        str(v) if isinstance(v, float) and not abs(v) < float("inf") else v
        for v in output_dict["operands"]
    ]
    return output_dict


def format_pair_table(rows: list[tuple[str, str, str, str]]) -> str:
    """Render integer pair table rows (first, second, intermediate, length)."""
    output = [f"{'first':<8}{'second':<8}{'cast':<8}{'length':<8}"]
    output.append("-" * 32)
    for first, second, intermediate, length in rows:
        output.append(f"{first:<8}{second:<8}{intermediate:<8}{length:<8}")
    return "\n".join(output)


class OutputFormatter(Protocol):
    """Protocol for output formatting strategies"""

    def format_result(self, result: MeasureResult) -> str | None:
        """Format and display a measure result"""
        ...


class ConsoleOutputFormatter:
    """Format measure results for console output"""

    def format_result(self, result: MeasureResult) -> None:
        domains = " x ".join(result.domains)
        operands = ", ".join(_format_operand(v) for v in result.operands)
        print(f"{result.operation}({operands}) over {domains}")
        print(f"  = {result.value} [{result.length_type}]")


class JSONOutputFormatter:
    """Format measure results as JSON (for automation)"""

    def format_result(self, result: MeasureResult) -> str:
        return json.dumps(_build_output_dict(result), indent=2)
