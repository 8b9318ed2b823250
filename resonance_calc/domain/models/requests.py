from dataclasses import dataclass

from .measurement import ComponentKind
from .units import FrequencyUnit, MetricPrefix


@dataclass(slots=True)
class FrequencyRequest:
    """
    Raw input of the frequency flow.

    Values are kept as entered (text or numbers); parsing happens in the
    calculation service so that empty and malformed fields are reported
    the same way for every caller.
    """

    capacitance: str | float | None = None
    inductance: str | float | None = None
    capacitance_prefix: MetricPrefix = MetricPrefix.MICRO
    inductance_prefix: MetricPrefix = MetricPrefix.MICRO


@dataclass(slots=True)
class ComponentRequest:
    """
    Raw input of the component flow: the known component and the target
    resonance frequency.
    """

    known: ComponentKind = ComponentKind.CAPACITOR
    component_value: str | float | None = None
    frequency: str | float | None = None
    component_prefix: MetricPrefix = MetricPrefix.MICRO
    frequency_unit: FrequencyUnit = FrequencyUnit.MHZ
