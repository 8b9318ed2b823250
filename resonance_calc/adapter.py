"""Facade adapter for simplified API integration."""

from environs import Env

from resonance_calc.config import Settings
from resonance_calc.application.calculation import (
    ComponentCalculationService,
    FrequencyCalculationService,
)
from resonance_calc.domain.models.measurement import ComponentKind
from resonance_calc.domain.models.requests import ComponentRequest, FrequencyRequest
from resonance_calc.domain.models.results import CalculationResult
from resonance_calc.domain.models.units import FrequencyUnit, MetricPrefix
from resonance_calc.infrastructure.output.formatters import format_result_lines


def _metric_prefix(prefix: MetricPrefix | str | None, default: MetricPrefix) -> MetricPrefix:
    if prefix is None:
        return default
    if isinstance(prefix, MetricPrefix):
        return prefix
    return MetricPrefix.from_symbol(prefix)


def _frequency_unit(unit: FrequencyUnit | str | None, default: FrequencyUnit) -> FrequencyUnit:
    if unit is None:
        return default
    if isinstance(unit, FrequencyUnit):
        return unit
    return FrequencyUnit.from_symbol(unit)


class ResonanceCalculatorAPI:
    """
    Simplified facade for external integration.

    Accepts raw field values and unit symbols the way a form or a command
    line delivers them, and returns a complete CalculationResult or raises
    a CalculatorException whose message can be shown to the user.
    """

    def __init__(self, settings: Settings | None = None):
        """
        Initialize facade.

        Args:
            settings: Presentation settings; defaults when omitted
        """
        self.settings = settings or Settings()
        self._frequency_service = FrequencyCalculationService()
        self._component_service = ComponentCalculationService()

    @classmethod
    def create_from_env(cls, env: Env) -> "ResonanceCalculatorAPI":
        """
        Factory method: one-line initialization from environment.

        Example:
            >>> from environs import Env
            >>> env = Env()
            >>> env.read_env()
            >>> facade = ResonanceCalculatorAPI.create_from_env(env)
        """
        return cls(Settings.from_env(env))

    def calculate_frequency(
        self,
        capacitance: str | float | None,
        inductance: str | float | None,
        capacitance_prefix: MetricPrefix | str | None = None,
        inductance_prefix: MetricPrefix | str | None = None,
    ) -> CalculationResult:
        """
        Resonance frequency of an LC tank.

        Args:
            capacitance: Capacitance value as text or number
            inductance: Inductance value as text or number
            capacitance_prefix: Prefix symbol or MetricPrefix (default from settings)
            inductance_prefix: Prefix symbol or MetricPrefix (default from settings)

        Raises:
            CalculatorException: With a user-facing message
        """
        request = FrequencyRequest(
            capacitance=capacitance,
            inductance=inductance,
            capacitance_prefix=_metric_prefix(
                capacitance_prefix, self.settings.default_component_prefix
            ),
            inductance_prefix=_metric_prefix(
                inductance_prefix, self.settings.default_component_prefix
            ),
        )
        return self._frequency_service.calculate(request)

    def calculate_component(
        self,
        known: ComponentKind | str,
        component_value: str | float | None,
        frequency: str | float | None,
        component_prefix: MetricPrefix | str | None = None,
        frequency_unit: FrequencyUnit | str | None = None,
    ) -> CalculationResult:
        """
        Missing component for a target resonance frequency.

        Args:
            known: The known component ('capacitor'/'inductor', 'C'/'L' or ComponentKind)
            component_value: Known component value as text or number
            frequency: Target frequency as text or number
            component_prefix: Prefix of the known component (default from settings)
            frequency_unit: Unit of the frequency (default from settings)

        Raises:
            CalculatorException: With a user-facing message
        """
        if not isinstance(known, ComponentKind):
            known = ComponentKind.from_name(known)

        request = ComponentRequest(
            known=known,
            component_value=component_value,
            frequency=frequency,
            component_prefix=_metric_prefix(
                component_prefix, self.settings.default_component_prefix
            ),
            frequency_unit=_frequency_unit(
                frequency_unit, self.settings.default_frequency_unit
            ),
        )
        return self._component_service.calculate(request)

    def render(self, result: CalculationResult) -> str:
        """Console text of a result, using the configured precision."""
        return "\n".join(format_result_lines(result, self.settings.display_precision))
