"""Constants used across the application."""

import numpy as np

TWO_PI = 2.0 * np.pi

# Digits after the decimal point of the scientific notation mantissa
SCIENTIFIC_DIGITS = 4

# Decimals of the scaled value in console output (overridable via DISPLAY_PRECISION)
DEFAULT_DISPLAY_PRECISION = 2

# Display tiers as (inclusive lower bound, scale, prefix), sorted descending.
# A tier with lower bound -inf catches every remaining value.
FREQUENCY_TIERS: tuple[tuple[float, float, str], ...] = (
    (1e9, 1e9, "G"),
    (1e6, 1e6, "M"),
    (1e3, 1e3, "k"),
    (-np.inf, 1.0, ""),
)

COMPONENT_TIERS: tuple[tuple[float, float, str], ...] = (
    (1.0, 1.0, ""),
    (1e-3, 1e-3, "m"),
    (1e-6, 1e-6, "µ"),
    (1e-9, 1e-9, "n"),
    (1e-12, 1e-12, "p"),
)
