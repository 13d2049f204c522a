"""Sensirion humidity and temperature sensors."""

import re
from typing import Any

from ..component_types import ComponentType
from ..families import sensor_profile
from ..mpn import clean_mpn
from .base import ManufacturerHandler

_SERIES = re.compile(r"^((?:SHT|STS)[0-9]{2})")

# Variant code after the first hyphen: SHT31-DIS-B, SHT40-AD1B
_VARIANT_PACKAGES = {
    "DIS": "DFN",
    "ARP": "DFN",
    "AD1B": "DFN",
    "AD1F": "DFN",
    "BD1B": "DFN",
    "D": "DFN",
    "B": "DFN",
    "F": "DFN",
    "P": "PIN",
}


class SensirionHandler(ManufacturerHandler):
    name = "sensirion"
    manufacturer = "Sensirion"

    PATTERNS = {
        ComponentType.HUMIDITY_SENSOR_SENSIRION: (
            r"^SHT[0-9]{2}.*",
        ),
        ComponentType.TEMPERATURE_SENSOR_SENSIRION: (
            r"^SHT[0-9]{2}.*",
            r"^STS[0-9]{2}.*",
        ),
    }

    def extract_series(self, mpn: str | None) -> str | None:
        """'SHT31-DIS-B2.5KS' -> 'SHT31'"""
        match = _SERIES.match(clean_mpn(mpn))
        return match.group(1) if match else None

    def extract_package_code(self, mpn: str | None) -> str | None:
        mpn = clean_mpn(mpn)
        if "-" not in mpn:
            return None
        variant = mpn.split("-")[1]
        return _VARIANT_PACKAGES.get(variant)

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        series = self.extract_series(mpn)
        return sensor_profile(series) if series else {}
