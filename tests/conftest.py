import pytest

from resonance_calc.adapter import ResonanceCalculatorAPI
from resonance_calc.config import Settings


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def calculator_api(settings):
    return ResonanceCalculatorAPI(settings)
