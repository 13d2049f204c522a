"""Maxim Integrated (incl. Dallas Semiconductor) temperature sensors."""

import re
from typing import Any

from ..component_types import ComponentType
from ..families import sensor_profile
from ..mpn import clean_mpn
from .base import ManufacturerHandler

# '+' marks lead-free, '+T' / '+T&R' tape and reel
_ORDERING_SUFFIX = re.compile(r"\+.*$")
_PARTS = re.compile(r"^(DS18B20|DS18S20|DS1822|MAX318[0-9]{2})([A-Z0-9]*)$")

_DS18_PACKAGES = {
    "": "TO-92",
    "PAR": "TO-92",
    "U": "uSOP-8",
    "Z": "SOIC-8",
}

# MAX318xx: temperature grade letter then package code (MAX31855KASA+)
_MAX_PACKAGES = {
    "SA": "SOIC-8",
    "UA": "uMAX-8",
    "TB": "TDFN-10",
    "UD": "TSSOP-14",
    "ATP": "TQFN-20",
}


class MaximHandler(ManufacturerHandler):
    name = "maxim"
    manufacturer = "Maxim Integrated"

    PATTERNS = {
        ComponentType.TEMPERATURE_SENSOR_MAXIM: (
            r"^DS18B20[A-Z]*(\+.*)?$",
            r"^DS18S20[A-Z]*(\+.*)?$",
            r"^DS1822[A-Z]*(\+.*)?$",
            r"^MAX318[0-9]{2}[A-Z]*(\+.*)?$",
        ),
    }

    def _split(self, mpn: str | None) -> tuple[str, str] | None:
        match = _PARTS.match(_ORDERING_SUFFIX.sub("", clean_mpn(mpn)))
        return (match.group(1), match.group(2)) if match else None

    def extract_series(self, mpn: str | None) -> str | None:
        """'DS18B20U+T&R' -> 'DS18B20', 'MAX31855KASA+' -> 'MAX31855'"""
        parts = self._split(mpn)
        return parts[0] if parts else None

    def extract_package_code(self, mpn: str | None) -> str | None:
        parts = self._split(mpn)
        if not parts:
            return None
        series, tail = parts
        if series.startswith("DS"):
            return _DS18_PACKAGES.get(tail)
        # Package is the last two or three letters (K = thermocouple type K, A = temp range)
        for length in (3, 2):
            code = tail[-length:]
            if code in _MAX_PACKAGES:
                return _MAX_PACKAGES[code]
        return None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        series = self.extract_series(mpn)
        return sensor_profile(series) if series else {}
