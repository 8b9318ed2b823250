# resonance_calc/domain/models/__init__.py
from .units import Farads, Henries, Hertz, MetricPrefix, FrequencyUnit
from .measurement import ComponentKind, Measurement
from .requests import FrequencyRequest, ComponentRequest
from .results import ScaledResult, FormulaText, CalculationResult

__all__ = [
    "Farads",
    "Henries",
    "Hertz",
    "MetricPrefix",
    "FrequencyUnit",
    "ComponentKind",
    "Measurement",
    "FrequencyRequest",
    "ComponentRequest",
    "ScaledResult",
    "FormulaText",
    "CalculationResult",
]
