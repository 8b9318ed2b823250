"""Runtime settings read from the environment."""

from dataclasses import dataclass

from environs import Env

from resonance_calc.domain.constants import DEFAULT_DISPLAY_PRECISION
from resonance_calc.domain.models.units import FrequencyUnit, MetricPrefix


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Presentation settings.

    display_precision: decimals of the scaled value in console output
    default_component_prefix: prefix used when the unit prompt is skipped
    default_frequency_unit: frequency unit used when the unit prompt is skipped
    """

    display_precision: int = DEFAULT_DISPLAY_PRECISION
    default_component_prefix: MetricPrefix = MetricPrefix.MICRO
    default_frequency_unit: FrequencyUnit = FrequencyUnit.MHZ

    def __post_init__(self):
        if not 0 <= self.display_precision <= 12:
            raise ValueError(
                f"display_precision must be in range [0, 12], got {self.display_precision}"
            )

    @classmethod
    def from_env(cls, env: Env) -> "Settings":
        """
        Build settings from environment variables.

        Example:
            >>> from environs import Env
            >>> env = Env()
            >>> env.read_env()
            >>> settings = Settings.from_env(env)
        """
        return cls(
            display_precision=env.int("DISPLAY_PRECISION", DEFAULT_DISPLAY_PRECISION),
            default_component_prefix=MetricPrefix.from_symbol(
                env.str("DEFAULT_COMPONENT_PREFIX", MetricPrefix.MICRO.symbol)
            ),
            default_frequency_unit=FrequencyUnit.from_symbol(
                env.str("DEFAULT_FREQUENCY_UNIT", FrequencyUnit.MHZ.symbol)
            ),
        )
