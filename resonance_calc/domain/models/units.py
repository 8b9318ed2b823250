# resonance_calc/domain/models/units.py
"""
Unit definitions for LC resonance calculations.

Base quantities are plain floats tagged with NewType so that a value in
farads cannot silently be passed where henries or hertz are expected.

The prefix sets are closed enums: every member carries its symbol and its
scale factor to the SI base unit, so normalization never has to guess.

Usage:
    from resonance_calc.domain.models.units import MetricPrefix, Farads

    capacitance = Farads(100 * MetricPrefix.MICRO.scale)
"""

from enum import Enum
from typing import NewType

from resonance_calc.domain.exceptions import UnknownUnitError

# SI base units
Farads = NewType("Farads", float)  # Capacitance
Henries = NewType("Henries", float)  # Inductance
Hertz = NewType("Hertz", float)  # Frequency


class MetricPrefix(Enum):
    """Decimal prefixes accepted for capacitance and inductance."""

    MILLI = ("m", 1e-3)
    MICRO = ("µ", 1e-6)
    NANO = ("n", 1e-9)
    PICO = ("p", 1e-12)

    def __init__(self, symbol: str, scale: float):
        self.symbol = symbol
        self.scale = scale

    @classmethod
    def from_symbol(cls, symbol: str) -> "MetricPrefix":
        """Resolve a prefix symbol, accepting the usual spellings of micro."""
        key = symbol.strip()
        key = _MICRO_ALIASES.get(key, key)
        for prefix in cls:
            if prefix.symbol == key:
                return prefix
        raise UnknownUnitError(
            f"Unknown prefix {symbol!r}. Expected one of: "
            f"{', '.join(p.symbol for p in cls)}"
        )

    def __str__(self) -> str:
        return self.symbol


class FrequencyUnit(Enum):
    """Frequency units accepted for resonance frequency input."""

    HZ = ("Hz", 1.0)
    KHZ = ("kHz", 1e3)
    MHZ = ("MHz", 1e6)
    GHZ = ("GHz", 1e9)

    def __init__(self, symbol: str, scale: float):
        self.symbol = symbol
        self.scale = scale

    @classmethod
    def from_symbol(cls, symbol: str) -> "FrequencyUnit":
        """Resolve a frequency unit symbol (case-insensitive)."""
        key = symbol.strip().lower()
        for unit in cls:
            if unit.symbol.lower() == key:
                return unit
        raise UnknownUnitError(
            f"Unknown frequency unit {symbol!r}. Expected one of: "
            f"{', '.join(u.symbol for u in cls)}"
        )

    def __str__(self) -> str:
        return self.symbol


# Micro sign (U+00B5) is canonical; Greek mu and ASCII "u" are common in input
_MICRO_ALIASES = {"μ": "µ", "u": "µ"}

Prefix = MetricPrefix | FrequencyUnit
