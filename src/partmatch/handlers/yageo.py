"""Yageo thick/thin film chip resistors and CC-series MLCCs."""

import re
from typing import Any

from ..component_types import ComponentType
from ..mpn import clean_mpn
from ..values import (
    IMPERIAL_TO_METRIC,
    TOLERANCE_CODES,
    imperial_to_metric,
    parse_capacitance_code,
    parse_resistance_code,
    parse_tolerance_code,
)
from .base import ManufacturerHandler

# RC0603FR-0710KL: series, size, tolerance, packaging, reel, value, finish
# RT0603BRD0710KL: thin film adds a TCR letter and drops the hyphen
_RESISTOR = re.compile(r"^(RC|RT|RL)([0-9]{4})([A-Z])([A-Z]{1,2})-?([0-9]{2})([0-9]+[RKM][0-9]*|[RKM][0-9]+)([A-Z]?)$")

# CC0603KRX7R9BB104: size, tolerance, packaging, dielectric, voltage, process, value
_CAPACITOR = re.compile(r"^CC([0-9]{4})([A-Z])([A-Z])(NP0|NPO|C0G|X7R|X5R|X7S|X6S|Y5V)([0-9])([A-Z]{2})([0-9]{3}|[0-9]*R[0-9]+)$")

# Chip sizes; keeps RC4558 (an op-amp) out of the resistor table
_SIZES = "(?:0201|0402|0603|0805|1206|1210|1812|2010|2512)"

# CC series rated voltage digit
_CAPACITOR_VOLTAGES = {
    "5": 6.3,
    "6": 10.0,
    "7": 16.0,
    "8": 25.0,
    "9": 50.0,
    "0": 100.0,
    "A": 200.0,
}

# Rated power (W) of the general purpose RC series by chip size
_RESISTOR_POWER = {
    "0201": 0.05,
    "0402": 0.0625,
    "0603": 0.1,
    "0805": 0.125,
    "1206": 0.25,
    "1210": 0.5,
    "2010": 0.75,
    "2512": 1.0,
}


class YageoHandler(ManufacturerHandler):
    name = "yageo"
    manufacturer = "Yageo"

    PATTERNS = {
        ComponentType.RESISTOR_CHIP_YAGEO: (
            rf"^RC{_SIZES}[A-Z][A-Z0-9-]+$",
            rf"^RT{_SIZES}[A-Z][A-Z0-9-]+$",
            rf"^RL{_SIZES}[A-Z][A-Z0-9-]+$",
        ),
        ComponentType.CAPACITOR_CERAMIC_YAGEO: (
            rf"^CC{_SIZES}[A-Z][A-Z0-9]+$",
        ),
    }

    def extract_package_code(self, mpn: str | None) -> str | None:
        """Imperial chip size: 'RC0603FR-0710KL' -> '0603'"""
        mpn = clean_mpn(mpn)
        if not mpn.startswith(("RC", "RT", "RL", "CC")):
            return None
        size = mpn[2:6]
        return size if size in IMPERIAL_TO_METRIC else None

    def extract_series(self, mpn: str | None) -> str | None:
        """Series plus size: 'RC0603FR-0710KL' -> 'RC0603'"""
        size = self.extract_package_code(mpn)
        return clean_mpn(mpn)[:2] + size if size else None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        mpn = clean_mpn(mpn)
        match = _RESISTOR.match(mpn)
        if match and match.group(2) in IMPERIAL_TO_METRIC:
            series, size, tolerance, _, _, value, _ = match.groups()
            attrs: dict[str, Any] = {
                "resistance": parse_resistance_code(value),
                "size": size,
                "size_metric": imperial_to_metric(size),
            }
            if tolerance in TOLERANCE_CODES:
                attrs["tolerance"] = parse_tolerance_code(tolerance)
            if series == "RC" and size in _RESISTOR_POWER:
                attrs["power"] = _RESISTOR_POWER[size]
            return attrs
        match = _CAPACITOR.match(mpn)
        if match and match.group(1) in IMPERIAL_TO_METRIC:
            size, tolerance, _, dielectric, voltage, _, value = match.groups()
            attrs = {
                "capacitance": parse_capacitance_code(value),
                "size": size,
                "size_metric": imperial_to_metric(size),
                # NPO is the common misspelling of C0G / NP0
                "dielectric": "C0G" if dielectric in ("NP0", "NPO") else dielectric,
            }
            if tolerance in TOLERANCE_CODES:
                attrs["tolerance"] = parse_tolerance_code(tolerance)
            if voltage in _CAPACITOR_VOLTAGES:
                attrs["voltage"] = _CAPACITOR_VOLTAGES[voltage]
            return attrs
        return {}
