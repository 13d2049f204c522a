"""Analog Devices: accelerometers, temperature sensors, precision op-amps."""

import re
from typing import Any

from ..component_types import ComponentType
from ..families import opamp_profile, sensor_profile
from ..mpn import clean_mpn
from .base import ManufacturerHandler

_PARTS = re.compile(r"^(ADXL[0-9]{3}|ADT7[0-9]{3}|AD590|TMP3[5-7]|OP[0-9]{2,3}|AD86[0-9]{2})([A-Z0-9]*)$")

# Ordering codes after the model number: grade letter(s), package, Z = RoHS
_PACKAGE_CODES = {
    "BCCZ": "LGA",
    "CCZ": "LGA",
    "BCPZ": "LFCSP",
    "CPZ": "LFCSP",
    "ACPZ": "LFCSP",
    "ARZ": "SOIC",
    "BRZ": "SOIC",
    "RZ": "SOIC",
    "R": "SOIC",
    "ARMZ": "MSOP",
    "RMZ": "MSOP",
    "RM": "MSOP",
    "ARUZ": "TSSOP",
    "RUZ": "TSSOP",
    "RU": "TSSOP",
    "GT9Z": "TO-92",
    "GRTZ": "SOT-23",
    "ARTZ": "SOT-23",
    "AKSZ": "SC-70",
    "NZ": "DIP",
    "N": "DIP",
}


class AnalogDevicesHandler(ManufacturerHandler):
    name = "analog_devices"
    manufacturer = "Analog Devices"

    PATTERNS = {
        ComponentType.ACCELEROMETER_ADI: (
            r"^ADXL[0-9]{3}[A-Z0-9-]*$",
        ),
        ComponentType.TEMPERATURE_SENSOR_ADI: (
            r"^ADT7[0-9]{3}[A-Z0-9-]*$",
            r"^AD590[A-Z0-9-]*$",
            r"^TMP3[5-7][A-Z0-9-]*$",
        ),
        ComponentType.OPAMP_ADI: (
            r"^OP[0-9]{2,3}[A-Z0-9-]*$",
            r"^AD86[0-9]{2}[A-Z0-9-]*$",
        ),
    }
    PACKAGE_CODES = _PACKAGE_CODES

    def _split(self, mpn: str | None) -> tuple[str, str] | None:
        # Reel options follow a hyphen: ADXL345BCCZ-RL7
        base = clean_mpn(mpn).split("-", 1)[0]
        match = _PARTS.match(base)
        return (match.group(1), match.group(2)) if match else None

    def extract_series(self, mpn: str | None) -> str | None:
        """'ADXL345BCCZ-RL7' -> 'ADXL345', 'TMP36GT9Z' -> 'TMP36'"""
        parts = self._split(mpn)
        return parts[0] if parts else None

    def extract_package_code(self, mpn: str | None) -> str | None:
        parts = self._split(mpn)
        if not parts or not parts[1]:
            return None
        tail = parts[1]
        # Exact ordering code first, then with the leading grade letter dropped
        for candidate in (tail, tail[1:]):
            if candidate in self.PACKAGE_CODES:
                return self.PACKAGE_CODES[candidate]
        return None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        series = self.extract_series(mpn)
        if not series:
            return {}
        return opamp_profile(series) or sensor_profile(series)
