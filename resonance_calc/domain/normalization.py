# resonance_calc/domain/normalization.py
from resonance_calc.domain.models.units import Prefix


def normalize(value: float, prefix: Prefix) -> float:
    """
    Convert a prefixed value to its SI base unit (F, H or Hz).

    Args:
        value: Numeric value as entered.
        prefix: MetricPrefix for capacitance/inductance or FrequencyUnit.

    Returns:
        The value in farads, henries or hertz.
    """
    return value * prefix.scale
