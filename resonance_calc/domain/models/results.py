"""Domain models for calculation results"""

from dataclasses import dataclass
from typing import Any

from resonance_calc.domain.constants import DEFAULT_DISPLAY_PRECISION
from .measurement import ComponentKind, Measurement


@dataclass(frozen=True, slots=True)
class ScaledResult:
    """Base-unit value re-expressed with a readable prefix (immutable)"""

    value: float
    unit: str  # prefix + unit letter, e.g. "kHz", "µF"
    in_range: bool = True  # False when no display tier covers the value

    def display(self, precision: int = DEFAULT_DISPLAY_PRECISION) -> str:
        return f"{self.value:.{precision}f} {self.unit}"

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class FormulaText:
    """LaTeX source of the governing formula, generic and with values applied"""

    general: str
    applied: str


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """
    Complete output of one calculation.

    `solved` is None for the frequency flow and the computed component
    kind for the component flow. The result is built only when every
    step succeeded, so there is no partially filled state.
    """

    solved: ComponentKind | None
    base_value: float
    base_unit: str  # "Hz", "H" or "F"
    scaled: ScaledResult
    scientific: str
    formula: FormulaText
    inputs: tuple[Measurement, Measurement]

    @property
    def title(self) -> str:
        if self.solved is None:
            return "Calculated Resonance Frequency"
        return f"Calculated {self.solved.quantity}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "title": self.title,
            "solved": "frequency" if self.solved is None else self.solved.name.lower(),
            "base_value": self.base_value,
            "base_unit": self.base_unit,
            "scaled": {
                "value": self.scaled.value,
                "unit": self.scaled.unit,
                "in_range": self.scaled.in_range,
            },
            "scientific": self.scientific,
            "formula": {
                "general": self.formula.general,
                "applied": self.formula.applied,
            },
            "inputs": [
                {
                    "value": m.value,
                    "prefix": m.prefix.symbol,
                    "text": m.display_value,
                }
                for m in self.inputs
            ],
        }
