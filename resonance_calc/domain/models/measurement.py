from dataclasses import dataclass
from enum import Enum

import numpy as np

from resonance_calc.domain.exceptions import InputError, InvalidNumberError
from .units import FrequencyUnit, MetricPrefix, Prefix


class ComponentKind(Enum):
    """Reactive component of an LC tank."""

    CAPACITOR = ("C", "F", "Capacitance")
    INDUCTOR = ("L", "H", "Inductance")

    def __init__(self, symbol: str, unit: str, quantity: str):
        self.symbol = symbol
        self.unit = unit
        self.quantity = quantity

    @property
    def counterpart(self) -> "ComponentKind":
        """The component solved for when this one is known."""
        if self is ComponentKind.CAPACITOR:
            return ComponentKind.INDUCTOR
        return ComponentKind.CAPACITOR

    @classmethod
    def from_name(cls, name: str) -> "ComponentKind":
        """Resolve 'capacitor'/'inductor' or the circuit symbols 'C'/'L'."""
        key = name.strip().lower()
        for kind in cls:
            if key in (kind.name.lower(), kind.symbol.lower()):
                return kind
        raise InputError(
            f"Unknown component {name!r}. Expected 'capacitor' or 'inductor'"
        )


@dataclass(frozen=True, slots=True)
class Measurement:
    """
    A user-entered quantity before normalization.

    `text` keeps the value as it was typed, for substitution into the
    formula shown to the user.
    """

    value: float
    prefix: Prefix
    text: str | None = None

    def __post_init__(self):
        if not np.isfinite(self.value):
            raise InvalidNumberError(
                f"Measurement value must be finite, got {self.value}"
            )
        if not isinstance(self.prefix, (MetricPrefix, FrequencyUnit)):
            raise TypeError(
                f"Expected MetricPrefix or FrequencyUnit, got {type(self.prefix)}"
            )

    @property
    def display_value(self) -> str:
        return self.text if self.text is not None else f"{self.value:g}"
