import numpy as np
import pytest

from resonance_calc.domain.exceptions import CalculatorException
from resonance_calc.domain.validators import (
    DegenerateInputError,
    ValidationError,
    validate_finite,
    validate_positive,
)


@pytest.mark.parametrize("value", [1.0, 0.0, -3, np.float64(2.5)])
def test_validate_finite_accepts_numbers(value):
    validate_finite(value)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), "1.0", None, True])
def test_validate_finite_rejects_non_numbers(value):
    with pytest.raises(ValidationError):
        validate_finite(value, "Capacitance")


@pytest.mark.parametrize("value", [0.0, -1e-12, float("inf")])
def test_validate_positive_rejects_degenerate_values(value):
    with pytest.raises(DegenerateInputError, match="Frequency"):
        validate_positive(value, "Frequency")


def test_validation_errors_are_calculator_and_value_errors():
    assert issubclass(DegenerateInputError, CalculatorException)
    assert issubclass(DegenerateInputError, ValueError)
