"""Nichicon aluminum electrolytic and conductive polymer capacitors.

Ordering code layout (UHS1E101MPD):
    UHS   series (temperature rating and life class come from the series)
    1E    rated voltage, EIA code
    101   capacitance, EIA code in microfarads
    M     tolerance letter
    PD    case / lead / taping code
"""

import re
from typing import Any

from ..component_types import ComponentType
from ..mpn import clean_mpn
from ..values import (
    EIA_VOLTAGE_CODES,
    TOLERANCE_CODES,
    parse_capacitance_code,
    parse_tolerance_code,
    parse_voltage_code,
)
from .base import ManufacturerHandler

_PARTS = re.compile(r"^(U[A-Z]{2}|PC[JSR])([0-9][A-Z])([0-9]{3}|[0-9]*R[0-9]+)([A-Z])([A-Z0-9]*)$")

# series: (temperature rating degC, life class, description)
SERIES_INFO: dict[str, tuple[int, str, str]] = {
    "UUD": (105, "standard", "Standard grade, SMD"),
    "UUE": (105, "standard", "Standard grade, high voltage"),
    "UHS": (125, "standard", "High temperature, 125C"),
    "UHE": (135, "standard", "High temperature, 135C"),
    "UHW": (105, "standard", "High temperature, 105C"),
    "UES": (105, "long_life", "Long life, standard"),
    "UEW": (105, "long_life", "Long life, high ripple"),
    "UKL": (105, "extra_long_life", "Extra long life"),
    "UPW": (105, "standard", "Low impedance"),
    "UPS": (105, "standard", "Ultra low impedance"),
    "UMA": (85, "standard", "Miniature, general purpose"),
    "UMD": (105, "standard", "Miniature, high temperature"),
    "PCJ": (105, "standard", "Polymer, standard"),
    "PCS": (105, "standard", "Polymer, low profile"),
    "PCR": (125, "standard", "Polymer, high reliability"),
}


class NichiconHandler(ManufacturerHandler):
    name = "nichicon"
    manufacturer = "Nichicon"

    PATTERNS = {
        ComponentType.CAPACITOR_ELECTROLYTIC_NICHICON: tuple(
            rf"^{series}[0-9][A-Z0-9]*$" for series in SERIES_INFO
        ),
    }

    def _split(self, mpn: str | None):
        return _PARTS.match(clean_mpn(mpn))

    def extract_series(self, mpn: str | None) -> str | None:
        """'UHS1E101MPD' -> 'UHS'"""
        mpn = clean_mpn(mpn)
        series = mpn[:3]
        return series if series in SERIES_INFO else None

    def extract_package_code(self, mpn: str | None) -> str | None:
        """Case / taping code after the tolerance letter: 'UHS1E101MPD' -> 'PD'"""
        match = self._split(mpn)
        if not match or match.group(1) not in SERIES_INFO:
            return None
        return match.group(5) or None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        match = self._split(mpn)
        if not match or match.group(1) not in SERIES_INFO:
            return {}
        series, voltage, value, tolerance, _ = match.groups()
        temperature, life, description = SERIES_INFO[series]
        attrs: dict[str, Any] = {
            "capacitance": parse_capacitance_code(value, unit=1e-6),
            "temperature_rating": temperature,
            "life": life,
            "series_description": description,
            "dielectric": "polymer" if series.startswith("PC") else "aluminum",
        }
        if voltage in EIA_VOLTAGE_CODES:
            attrs["voltage"] = parse_voltage_code(voltage)
        if tolerance in TOLERANCE_CODES:
            attrs["tolerance"] = parse_tolerance_code(tolerance)
        return attrs
