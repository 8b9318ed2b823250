class CalculatorException(Exception):
    """
    Base exception for all calculator errors.

    The message of every subclass is meant to be shown to the user as is.
    """


class InputError(CalculatorException, ValueError):
    """
    Base exception for input that cannot be turned into a measurement.
    """


class MissingInputError(InputError):
    """
    Raised when one or more required fields are empty.
    """


class InvalidNumberError(InputError):
    """
    Raised when a field does not hold a finite number.
    """


class UnknownUnitError(InputError):
    """
    Raised when a unit or prefix symbol is outside the supported set.
    """


class CalculationError(CalculatorException):
    """
    Raised for any unexpected failure while a calculation is running.
    The original exception is chained as the cause.
    """

    default_message = "Calculation error. Please check your inputs."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
