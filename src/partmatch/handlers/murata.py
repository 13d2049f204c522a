"""Murata multilayer ceramic capacitors (GRM, GCM, GCJ, GRT)."""

import re
from typing import Any

from ..component_types import ComponentType
from ..mpn import clean_mpn
from ..values import (
    EIA_VOLTAGE_CODES,
    TOLERANCE_CODES,
    imperial_to_metric,
    parse_capacitance_code,
    parse_tolerance_code,
)
from .base import ManufacturerHandler

# GRM188R71H104KA93D: series, size, thickness, dielectric, voltage, value, tolerance, rest
_PARTS = re.compile(
    r"^(GRM|GCM|GCJ|GRT)([0-9]{2})([0-9A-Z])([A-Z0-9]{2})([0-9][A-Z])([0-9]{3}|[0-9]R[0-9]|R[0-9]{2})([A-Z])([A-Z0-9]*)$"
)

_SERIES = re.compile(r"^((?:GRM|GCM|GCJ|GRT)[0-9]{2}[0-9A-Z])")

# Murata two-digit size code -> imperial chip size
SIZE_CODES = {
    "02": "01005",
    "03": "0201",
    "15": "0402",
    "18": "0603",
    "21": "0805",
    "31": "1206",
    "32": "1210",
    "43": "1812",
    "55": "2220",
}

DIELECTRIC_CODES = {
    "R7": "X7R",
    "R6": "X5R",
    "5C": "C0G",
    "C7": "X7S",
    "C8": "X6S",
    "D7": "X7T",
    "F5": "Y5V",
}


class MurataHandler(ManufacturerHandler):
    name = "murata"
    manufacturer = "Murata"

    PATTERNS = {
        ComponentType.CAPACITOR_CERAMIC_MURATA: (
            r"^GRM[0-9]{2}[0-9A-Z][A-Z0-9]*$",
            r"^GCM[0-9]{2}[0-9A-Z][A-Z0-9]*$",
            r"^GCJ[0-9]{2}[0-9A-Z][A-Z0-9]*$",
            r"^GRT[0-9]{2}[0-9A-Z][A-Z0-9]*$",
        ),
    }

    def extract_package_code(self, mpn: str | None) -> str | None:
        """Imperial chip size from the size code: 'GRM188R71H104KA93D' -> '0603'"""
        mpn = clean_mpn(mpn)
        if not mpn.startswith(("GRM", "GCM", "GCJ", "GRT")):
            return None
        return SIZE_CODES.get(mpn[3:5])

    def extract_series(self, mpn: str | None) -> str | None:
        """Series, size and thickness: 'GRM188R71H104KA93D' -> 'GRM188'"""
        match = _SERIES.match(clean_mpn(mpn))
        return match.group(1) if match else None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        match = _PARTS.match(clean_mpn(mpn))
        if not match:
            return {}
        _, size_code, _, dielectric, voltage, value, tolerance, _ = match.groups()
        attrs: dict[str, Any] = {"capacitance": parse_capacitance_code(value)}
        size = SIZE_CODES.get(size_code)
        if size:
            attrs["size"] = size
            attrs["size_metric"] = imperial_to_metric(size)
        if dielectric in DIELECTRIC_CODES:
            attrs["dielectric"] = DIELECTRIC_CODES[dielectric]
        if voltage in EIA_VOLTAGE_CODES:
            attrs["voltage"] = EIA_VOLTAGE_CODES[voltage]
        if tolerance in TOLERANCE_CODES:
            attrs["tolerance"] = parse_tolerance_code(tolerance)
        return attrs
