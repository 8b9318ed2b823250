import argparse
import sys
from typing import TextIO

from environs import Env

from resonance_calc.logging_config import setup_logging
from resonance_calc.adapter import ResonanceCalculatorAPI
from resonance_calc.config import Settings
from resonance_calc.domain.exceptions import CalculatorException
from resonance_calc.domain.models.measurement import ComponentKind
from resonance_calc.domain.models.results import CalculationResult
from resonance_calc.domain.models.units import FrequencyUnit, MetricPrefix
from resonance_calc.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
)


class UserInputHandler:
    def __init__(self, settings: Settings, prompt_stream: TextIO | None = None):
        self.settings = settings
        # When set, prompts are written here instead of stdout
        self.prompt_stream = prompt_stream

    def _ask(self, prompt: str) -> str:
        if self.prompt_stream is None:
            return input(prompt)
        self.prompt_stream.write(prompt)
        self.prompt_stream.flush()
        return input()

    def get_value(self, prompt: str) -> str:
        return self._ask(prompt)

    def get_metric_prefix(self, quantity: str, unit: str) -> MetricPrefix:
        default = self.settings.default_component_prefix
        choices = ", ".join(p.symbol for p in MetricPrefix)
        symbol = self._ask(
            f"Enter {quantity} prefix [{choices}] or skip to use {default.symbol}{unit}: "
        )
        return MetricPrefix.from_symbol(symbol) if symbol.strip() else default

    def get_frequency_unit(self) -> FrequencyUnit:
        default = self.settings.default_frequency_unit
        choices = ", ".join(u.symbol for u in FrequencyUnit)
        symbol = self._ask(f"Enter frequency unit [{choices}] or skip to use {default.symbol}: ")
        return FrequencyUnit.from_symbol(symbol) if symbol.strip() else default

    def get_known_component(self) -> ComponentKind:
        name = self._ask("Which component value do you already know? [C/L] (default C): ")
        return ComponentKind.from_name(name) if name.strip() else ComponentKind.CAPACITOR


def run_frequency(
    api: ResonanceCalculatorAPI, input_handler: UserInputHandler
) -> CalculationResult:
    capacitance = input_handler.get_value("Enter capacitance value: ")
    capacitance_prefix = input_handler.get_metric_prefix("capacitance", "F")
    inductance = input_handler.get_value("Enter inductance value: ")
    inductance_prefix = input_handler.get_metric_prefix("inductance", "H")
    return api.calculate_frequency(
        capacitance, inductance, capacitance_prefix, inductance_prefix
    )


def run_component(
    api: ResonanceCalculatorAPI, input_handler: UserInputHandler
) -> CalculationResult:
    known = input_handler.get_known_component()
    value = input_handler.get_value(f"Enter {known.quantity.lower()} value: ")
    prefix = input_handler.get_metric_prefix(known.quantity.lower(), known.unit)
    frequency = input_handler.get_value("Enter resonance frequency value: ")
    frequency_unit = input_handler.get_frequency_unit()
    return api.calculate_component(known, value, frequency, prefix, frequency_unit)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="LC Resonance Calculator")
    parser.add_argument(
        "--mode",
        type=str,
        choices=["component", "frequency"],
        default="component",
        help="Solve for the missing component (default) or for the resonance frequency",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON; prompts and log records go to stderr",
    )
    args = parser.parse_args(argv)

    # Load environment variables as early as possible within main()
    env = Env()
    env.read_env(".env")

    # Keep stdout for the JSON document alone
    setup_logging(env, stream=sys.stderr if args.json else None)

    api = ResonanceCalculatorAPI.create_from_env(env)
    input_handler = UserInputHandler(api.settings, sys.stderr if args.json else None)

    try:
        if args.mode == "frequency":
            result = run_frequency(api, input_handler)
        else:
            result = run_component(api, input_handler)
    except CalculatorException as e:
        print(f"Error: {e}")
        return 1
    except EOFError:
        print("Error: input ended before all values were entered")
        return 1

    if args.json:
        print(JSONOutputFormatter().format_result(result))
    else:
        ConsoleOutputFormatter(api.settings.display_precision).format_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
