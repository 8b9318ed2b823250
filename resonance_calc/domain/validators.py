"""Input validation utilities for resonance calculations."""

import numpy as np

from resonance_calc.domain.exceptions import CalculatorException


class ValidationError(CalculatorException, ValueError):
    """Raised when validation fails."""

    pass


class DegenerateInputError(ValidationError):
    """Raised when an input would make the resonance formula non-finite."""

    pass


def validate_finite(value: float, name: str = "value") -> None:
    """Validate that a value is a real, finite number.

    Args:
        value: Value to check
        name: Quantity name for error messages

    Raises:
        ValidationError: If the value is not numeric, NaN or infinite
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, np.floating)):
        raise ValidationError(f"{name} must be numeric, got {type(value)}")

    if not np.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value}")


def validate_positive(value: float, name: str = "value") -> None:
    """Validate a quantity entering the resonance formula.

    Zero makes the formula divide by zero and negative values make the
    square root imaginary, so both are rejected before evaluation.

    Args:
        value: Quantity in SI base units
        name: Quantity name for error messages

    Raises:
        DegenerateInputError: If the value is zero, negative or non-finite
    """
    try:
        validate_finite(value, name)
    except ValidationError as e:
        raise DegenerateInputError(str(e)) from e

    if value <= 0:
        raise DegenerateInputError(f"{name} must be positive, got {value}")
