# resonance_calc/domain/scaling.py
"""
Display scaling of base-unit results.

A tier table is a sequence of (lower_bound, scale, prefix) entries sorted
by descending lower bound. The first tier whose lower bound the value
reaches wins, so exact powers of ten take the larger prefix (1e9 Hz is
"1 GHz", not "1000 MHz").
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

import numpy as np

from resonance_calc.domain.constants import (
    COMPONENT_TIERS,
    FREQUENCY_TIERS,
    SCIENTIFIC_DIGITS,
)
from resonance_calc.domain.models.results import ScaledResult


def scale_to_tier(
    value: float, tiers: Sequence[tuple[float, float, str]], unit: str
) -> ScaledResult:
    """
    Express a value with the prefix of the first tier it falls into.

    Values that no tier covers (below the smallest bound, or nan) are
    returned unscaled with the bare unit and in_range=False.
    """
    for lower_bound, scale, prefix in tiers:
        if value >= lower_bound:
            return ScaledResult(value=value / scale, unit=f"{prefix}{unit}")
    return ScaledResult(value=value, unit=unit, in_range=False)


def format_frequency(hertz: float) -> ScaledResult:
    """Scale a frequency to Hz, kHz, MHz or GHz."""
    return scale_to_tier(hertz, FREQUENCY_TIERS, "Hz")


def format_component(value: float, unit: str) -> ScaledResult:
    """
    Scale a capacitance or inductance to the matching milli to pico prefix.

    Args:
        value: Component value in farads or henries.
        unit: Target unit letter, "F" or "H".

    Returns:
        ScaledResult; below 1 pico (and for zero, negative or non-finite
        values) the result is unscaled and flagged with in_range=False.
    """
    if unit not in ("F", "H"):
        raise ValueError(f"Component unit must be 'F' or 'H', got {unit!r}")
    return scale_to_tier(value, COMPONENT_TIERS, unit)


def format_scientific(value: float, unit: str) -> str:
    """
    Render a value as "<mantissa>e<exponent> <unit>".

    The mantissa has SCIENTIFIC_DIGITS decimals and the exponent carries
    its sign without zero padding, e.g. "1.5915e+5 Hz". The mantissa is
    rounded from the exact binary value with ties away from zero, so
    1.03125 gives "1.0313e+0".
    """
    if not np.isfinite(value):
        return f"{value} {unit}"
    if value == 0:
        return f"{0:.{SCIENTIFIC_DIGITS}f}e+0 {unit}"

    exact = Decimal(float(value))
    exponent = exact.adjusted()
    rounded = exact.quantize(
        Decimal(1).scaleb(exponent - SCIENTIFIC_DIGITS), rounding=ROUND_HALF_UP
    )
    # 9.99995 rounds up to 10.0000 and moves into the next decade
    if rounded.adjusted() > exponent:
        exponent += 1
        rounded = exact.quantize(
            Decimal(1).scaleb(exponent - SCIENTIFIC_DIGITS), rounding=ROUND_HALF_UP
        )

    mantissa = rounded.scaleb(-exponent)
    return f"{mantissa:.{SCIENTIFIC_DIGITS}f}e{exponent:+d} {unit}"
