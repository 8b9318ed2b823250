"""Output formatting services for console display."""

import json
from typing import Protocol

from resonance_calc.domain.constants import DEFAULT_DISPLAY_PRECISION
from resonance_calc.domain.models.results import CalculationResult


def _format_dict_floats(d, precision):
    for k, v in d.items():
        if isinstance(v, float):
            d[k] = round(v, precision)
        elif isinstance(v, dict):
            _format_dict_floats(v, precision)
        elif isinstance(v, list):
            d[k] = [
                _format_dict_floats(i, precision)
                if isinstance(i, dict)
                else (round(i, precision) if isinstance(i, float) else i)
                for i in v
            ]
    return d


def format_result_lines(
    result: CalculationResult, precision: int = DEFAULT_DISPLAY_PRECISION
) -> list[str]:
    """
    Render a calculation result as console lines.

    Args:
        result: Successful calculation result
        precision: Decimals of the scaled value

    Returns:
        Lines without trailing newlines
    """
    lines = [f"\n{'=' * 60}", result.title, f"{'=' * 60}"]

    lines.append(f"  Scaled Value:            {result.scaled.display(precision)}")
    if not result.scaled.in_range:
        lines.append("    (below the smallest supported prefix, shown in base units)")
    lines.append(f"  Scientific Notation:     {result.scientific}")

    lines.append("\n  Formula Used:")
    lines.append(f"    General:   {result.formula.general}")
    lines.append(f"    Applied:   {result.formula.applied}")
    lines.append(f"{'=' * 60}\n")
    return lines


class OutputFormatter(Protocol):
    """Protocol for output formatting strategies"""

    def format_result(self, result: CalculationResult) -> str | None:
        """Format and display a calculation result"""
        ...


class ConsoleOutputFormatter:
    """Format calculation results for console output"""

    def __init__(self, precision: int = DEFAULT_DISPLAY_PRECISION):
        self.precision = precision

    def format_result(self, result: CalculationResult) -> None:
        for line in format_result_lines(result, self.precision):
            print(line)


class JSONOutputFormatter:
    """Format calculation results as JSON (for API/automation)"""

    def __init__(self, precision: int | None = None):
        # None keeps full double precision
        self.precision = precision

    def format_result(self, result: CalculationResult) -> str:
        output_dict = result.to_dict()
        if self.precision is not None:
            output_dict = _format_dict_floats(output_dict, self.precision)
        return json.dumps(output_dict, indent=2, ensure_ascii=False)
