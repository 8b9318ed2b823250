from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from resonance_calc.application.services.formula import (
    component_formula,
    frequency_formula,
)
from resonance_calc.application.services.input_parser import MeasurementParser
from resonance_calc.domain.exceptions import CalculationError, CalculatorException
from resonance_calc.domain.models.measurement import ComponentKind, Measurement
from resonance_calc.domain.models.requests import ComponentRequest, FrequencyRequest
from resonance_calc.domain.models.results import (
    CalculationResult,
    FormulaText,
    ScaledResult,
)
from resonance_calc.domain.models.units import Farads, Henries, Hertz
from resonance_calc.domain.normalization import normalize
from resonance_calc.domain.resonance import solve_component, solve_frequency
from resonance_calc.domain.scaling import (
    format_component,
    format_frequency,
    format_scientific,
)
from resonance_calc.logging_config import get_logger

logger = get_logger(__name__)

RequestT = TypeVar("RequestT", FrequencyRequest, ComponentRequest)


class BaseCalculationService(ABC, Generic[RequestT]):
    """
    Base class for calculation services.

    Runs the shared pipeline: parse the two fields, normalize them to base
    units, solve, scale for display. Subclasses supply the field layout,
    the solver and the result labels.
    """

    missing_message = "Please fill in all required fields"

    def __init__(self, parser: MeasurementParser | None = None):
        self._parser = parser or MeasurementParser(self.missing_message)

    def calculate(self, request: RequestT) -> CalculationResult:
        try:
            first, second = self._parser.parse_many(*self._fields(request))
            logger.debug(
                f"{type(self).__name__} inputs: "
                f"{first.value} {first.prefix}, {second.value} {second.prefix}"
            )

            base_value = self._solve(
                request,
                normalize(first.value, first.prefix),
                normalize(second.value, second.prefix),
            )
            base_unit = self._base_unit(request)

            result = CalculationResult(
                solved=self._solved(request),
                base_value=base_value,
                base_unit=base_unit,
                scaled=self._scale(base_value, base_unit),
                scientific=format_scientific(base_value, base_unit),
                formula=self._formula(request, first, second),
                inputs=(first, second),
            )
        except CalculatorException as e:
            logger.warning(f"{type(self).__name__} rejected input: {e}")
            raise
        except Exception as e:
            logger.exception(f"Unexpected error in {type(self).__name__}")
            raise CalculationError() from e

        logger.info(f"{result.title}: {result.scaled} ({result.scientific})")
        return result

    @abstractmethod
    def _fields(self, request: RequestT) -> list[tuple]:
        """(raw value, prefix) pairs in solver argument order"""
        ...

    @abstractmethod
    def _solve(self, request: RequestT, first: float, second: float) -> float: ...

    @abstractmethod
    def _solved(self, request: RequestT) -> ComponentKind | None: ...

    @abstractmethod
    def _base_unit(self, request: RequestT) -> str: ...

    @abstractmethod
    def _scale(self, base_value: float, base_unit: str) -> ScaledResult: ...

    @abstractmethod
    def _formula(
        self, request: RequestT, first: Measurement, second: Measurement
    ) -> FormulaText: ...


class FrequencyCalculationService(BaseCalculationService[FrequencyRequest]):
    """Resonance frequency from capacitance and inductance."""

    missing_message = "Please fill in both capacitance and inductance values"

    def _fields(self, request: FrequencyRequest) -> list[tuple]:
        return [
            (request.capacitance, request.capacitance_prefix),
            (request.inductance, request.inductance_prefix),
        ]

    def _solve(self, request: FrequencyRequest, first: float, second: float) -> float:
        return solve_frequency(Farads(first), Henries(second))

    def _solved(self, request: FrequencyRequest) -> None:
        return None

    def _base_unit(self, request: FrequencyRequest) -> str:
        return "Hz"

    def _scale(self, base_value: float, base_unit: str) -> ScaledResult:
        return format_frequency(base_value)

    def _formula(
        self, request: FrequencyRequest, first: Measurement, second: Measurement
    ) -> FormulaText:
        return frequency_formula(first, second)


class ComponentCalculationService(BaseCalculationService[ComponentRequest]):
    """Missing reactive component from the known one and the resonance frequency."""

    def _fields(self, request: ComponentRequest) -> list[tuple]:
        return [
            (request.component_value, request.component_prefix),
            (request.frequency, request.frequency_unit),
        ]

    def _solve(self, request: ComponentRequest, first: float, second: float) -> float:
        return solve_component(first, Hertz(second))

    def _solved(self, request: ComponentRequest) -> ComponentKind:
        return request.known.counterpart

    def _base_unit(self, request: ComponentRequest) -> str:
        return request.known.counterpart.unit

    def _scale(self, base_value: float, base_unit: str) -> ScaledResult:
        return format_component(base_value, base_unit)

    def _formula(
        self, request: ComponentRequest, first: Measurement, second: Measurement
    ) -> FormulaText:
        return component_formula(request.known, first, second)
