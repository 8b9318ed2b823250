# resonance_calc/domain/resonance.py
"""
LC resonance relation solved in both directions.

    f = 1 / (2π * sqrt(L * C))

Solving for one reactive component given the other and f:

    X = 1 / ((2π * f)^2 * Y)

All arguments are in SI base units. Zero, negative and non-finite
arguments are rejected with DegenerateInputError before evaluation, so
the functions never return inf or nan.
"""

import numpy as np

from resonance_calc.domain.constants import TWO_PI
from resonance_calc.domain.models.units import Farads, Henries, Hertz
from resonance_calc.domain.validators import DegenerateInputError, validate_positive


def angular_frequency(frequency_hz: Hertz) -> float:
    """Angular frequency ω = 2πf in rad/s."""
    return float(TWO_PI * frequency_hz)


def solve_frequency(capacitance_f: Farads, inductance_h: Henries) -> Hertz:
    """
    Resonance frequency of an LC tank.

    Args:
        capacitance_f: Capacitance in farads.
        inductance_h: Inductance in henries.

    Returns:
        Resonance frequency in hertz.

    Raises:
        DegenerateInputError: If either component is not a positive finite
            number, or their product underflows to zero.
    """
    validate_positive(capacitance_f, "Capacitance")
    validate_positive(inductance_h, "Inductance")

    lc = inductance_h * capacitance_f
    if lc <= 0 or not np.isfinite(lc):
        raise DegenerateInputError(
            f"L*C product {lc} is outside the representable range"
        )

    return Hertz(float(1.0 / (TWO_PI * np.sqrt(lc))))


def solve_component(known_value_base: float, frequency_hz: Hertz) -> float:
    """
    Missing reactive component for a target resonance frequency.

    Args:
        known_value_base: The known component in its base unit (F or H).
        frequency_hz: Target resonance frequency in hertz.

    Returns:
        The unknown component in its base unit: henries when the
        capacitance is known, farads when the inductance is known.

    Raises:
        DegenerateInputError: If an argument is not a positive finite number
            or the result is not finite.
    """
    validate_positive(known_value_base, "Known component value")
    validate_positive(frequency_hz, "Frequency")

    omega = np.float64(angular_frequency(frequency_hz))
    with np.errstate(over="ignore", under="ignore"):
        denominator = omega**2 * known_value_base
        if denominator == 0 or not np.isfinite(denominator):
            raise DegenerateInputError(
                f"(2πf)^2 * Y = {denominator} for f={frequency_hz}, Y={known_value_base}"
            )
        result = 1.0 / denominator

    if not np.isfinite(result) or result <= 0:
        raise DegenerateInputError(
            f"Result {result} is outside the representable range"
        )
    return float(result)
