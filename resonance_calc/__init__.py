"""LC resonance calculator package."""

from resonance_calc.adapter import ResonanceCalculatorAPI
from resonance_calc.config import Settings

__all__ = ["ResonanceCalculatorAPI", "Settings"]
