"""Texas Instruments: general purpose op-amps, temperature sensors, linear regulators."""

import re
from typing import Any

from ..component_types import ComponentType
from ..families import opamp_profile, regulator_profile, sensor_profile
from ..mpn import clean_mpn
from .base import ManufacturerHandler

_OPAMP_STEMS = r"LM358|LM2904|LM324|LM2902|LM1458|LM741|UA741|TL07[1-4]|TL08[1-4]|NE5532|RC4558|RC4136"

# Stem + optional grade letter(s) + package/packaging tail
_OPAMP_PARTS = re.compile(rf"^({_OPAMP_STEMS})([AB]?)([A-Z0-9]*)$")
_LM35_PARTS = re.compile(r"^(LM35)(?:([A-D]A?)([A-Z0-9]*))?$")
_TMP_PARTS = re.compile(r"^(TMP1[0-9]{2})([A-Z0-9]*)$")
_REGULATOR_PARTS = re.compile(r"^(LM317|LM337|LM338|LM350|(?:LM|UA)7[89][LM]?[0-9]{2})([A-Z0-9]*)$")

# Temperature/grade letters that precede the package code (TL072CP, TMP117AIDRVR)
_GRADE_PREFIX = re.compile(r"^[ACIM]+(?=[A-Z])")

# TI package designators, matched as the longest prefix of the tail
_PACKAGE_CODES = {
    "N": "DIP",
    "P": "DIP",
    "D": "SOIC",
    "DR": "SOIC",
    "DW": "SOIC-Wide",
    "PW": "TSSOP",
    "DGK": "MSOP",
    "DBV": "SOT-23",
    "DCK": "SC-70",
    "DRL": "SOT-553",
    "DRV": "WSON",
    "DSG": "WSON",
    "LP": "TO-92",
    "Z": "TO-92",
    "KC": "TO-220",
    "KCS": "TO-220",
    "T": "TO-220",
    "DCY": "SOT-223",
}


class TexasInstrumentsHandler(ManufacturerHandler):
    name = "texas_instruments"
    manufacturer = "Texas Instruments"

    PATTERNS = {
        ComponentType.OPAMP_TI: (
            rf"^({_OPAMP_STEMS})[A-Z0-9]*(/NOPB)?$",
        ),
        ComponentType.TEMPERATURE_SENSOR_TI: (
            r"^LM35[A-D][A-Z0-9]*(/NOPB)?$",  # Letter after 35, so LM358 is never a sensor
            r"^TMP1[0-9]{2}[A-Z0-9]*$",
        ),
        ComponentType.VOLTAGE_REGULATOR_TI: (
            r"^LM3(17|37|38|50)[A-Z0-9]*(/NOPB)?$",
            r"^(LM|UA)7[89][LM]?[0-9]{2}[A-Z0-9]*$",
        ),
    }
    PACKAGE_CODES = _PACKAGE_CODES

    def _split(self, mpn: str | None) -> tuple[str, str] | None:
        """Split into (series, tail) for any TI family this handler knows."""
        mpn = clean_mpn(mpn).removesuffix("/NOPB")
        match = _OPAMP_PARTS.match(mpn) or _LM35_PARTS.match(mpn)
        if match:
            return match.group(1), match.group(3)
        match = _TMP_PARTS.match(mpn) or _REGULATOR_PARTS.match(mpn)
        if match:
            return match.group(1), match.group(2)
        return None

    def extract_series(self, mpn: str | None) -> str | None:
        """'LM358AD' -> 'LM358', 'TL072CP' -> 'TL072', 'LM35DZ' -> 'LM35'"""
        parts = self._split(mpn)
        return parts[0] if parts else None

    def extract_package_code(self, mpn: str | None) -> str | None:
        parts = self._split(mpn)
        if not parts or not parts[1]:
            return None
        tail = _GRADE_PREFIX.sub("", parts[1])
        for length in range(len(tail), 0, -1):
            code = tail[:length]
            if code in self.PACKAGE_CODES:
                return self.PACKAGE_CODES[code]
        return None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        series = self.extract_series(mpn)
        if not series:
            return {}
        return opamp_profile(series) or regulator_profile(series) or sensor_profile(mpn)
