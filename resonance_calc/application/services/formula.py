"""LaTeX source of the resonance formulas with the entered values substituted.

Typesetting is left to the display layer; only the source text is built here.
"""

from resonance_calc.domain.models.measurement import ComponentKind, Measurement
from resonance_calc.domain.models.results import FormulaText


def _quantity(measurement: Measurement, unit: str = "") -> str:
    return rf"{measurement.display_value} \, \text{{{measurement.prefix.symbol}{unit}}}"


def frequency_formula(capacitance: Measurement, inductance: Measurement) -> FormulaText:
    """f = 1 / (2π·sqrt(LC)), applied to the entered C and L."""
    general = r"f = \frac{1}{2\pi \sqrt{LC}}"
    applied = (
        r"f = \frac{1}{2\pi \sqrt{"
        + _quantity(capacitance, "F")
        + r" \cdot "
        + _quantity(inductance, "H")
        + "}}"
    )
    return FormulaText(general=general, applied=applied)


def component_formula(
    known: ComponentKind, component: Measurement, frequency: Measurement
) -> FormulaText:
    """X = 1 / ((2πf)^2 · Y), where Y is the known component and X the other one."""
    unknown = known.counterpart
    general = rf"{unknown.symbol} = \frac{{1}}{{(2\pi f)^2 \cdot {known.symbol}}}"
    applied = (
        rf"{unknown.symbol} = \frac{{1}}{{(2\pi \cdot "
        + _quantity(frequency)
        + r")^2 \cdot "
        + _quantity(component, known.unit)
        + "}"
    )
    return FormulaText(general=general, applied=applied)
