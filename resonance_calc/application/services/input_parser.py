import re

import numpy as np

from resonance_calc.domain.exceptions import InvalidNumberError, MissingInputError
from resonance_calc.domain.models.measurement import Measurement
from resonance_calc.domain.models.units import Prefix

INVALID_NUMBERS_MESSAGE = "Please enter valid numbers"
THOUSANDS_PATTERN = re.compile(r"[+-]?[1-9]\d{0,2},\d{3}")


class MeasurementParser:
    """
    Turns raw field values into measurements.

    Accepts text (with either a decimal point or a decimal comma) and plain
    numbers. A comma followed by a group of three digits ("1,000") or mixed
    with a point is ambiguous and rejected; "0,125" and "4,7" are decimals.
    Empty fields are reported as missing; anything else that is
    not a finite number is reported as invalid.
    """

    def __init__(self, missing_message: str = "Please fill in all required fields"):
        self.missing_message = missing_message

    def _is_empty(self, raw: str | float | None) -> bool:
        return raw is None or (isinstance(raw, str) and not raw.strip())

    def _to_float(self, raw: str | float) -> float:
        """Converts one field to a finite float."""
        if isinstance(raw, bool):
            raise InvalidNumberError(INVALID_NUMBERS_MESSAGE)

        if isinstance(raw, str):
            text = raw.strip()
            if "," in text:
                # "1,000" and "1,000.5" read as thousands separators, not decimals
                if "." in text or text.count(",") > 1 or THOUSANDS_PATTERN.fullmatch(text):
                    raise InvalidNumberError(INVALID_NUMBERS_MESSAGE)
                text = text.replace(",", ".")
            try:
                value = float(text)
            except ValueError:
                raise InvalidNumberError(INVALID_NUMBERS_MESSAGE)
        elif isinstance(raw, (int, float, np.floating, np.integer)):
            value = float(raw)
        else:
            raise InvalidNumberError(INVALID_NUMBERS_MESSAGE)

        if not np.isfinite(value):
            raise InvalidNumberError(INVALID_NUMBERS_MESSAGE)
        return value

    def parse(self, raw: str | float | None, prefix: Prefix) -> Measurement:
        """Parses a single field."""
        return self.parse_many((raw, prefix))[0]

    def parse_many(
        self, *fields: tuple[str | float | None, Prefix]
    ) -> list[Measurement]:
        """
        Parses several fields at once.

        Missing fields are checked across all fields before any number is
        parsed, so an empty field is never reported as an invalid number.
        """
        if any(self._is_empty(raw) for raw, _ in fields):
            raise MissingInputError(self.missing_message)

        measurements = []
        for raw, prefix in fields:
            text = raw.strip() if isinstance(raw, str) else None
            measurements.append(
                Measurement(value=self._to_float(raw), prefix=prefix, text=text)
            )
        return measurements
