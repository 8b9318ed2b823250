# resonance_calc/application/services/__init__.py
from .input_parser import MeasurementParser
from .formula import frequency_formula, component_formula

__all__ = [
    "MeasurementParser",
    "frequency_formula",
    "component_formula",
]
