"""JST wire-to-board connectors (PH, XH, SH, GH, ZH, EH families).

Two naming schemes are recognized:
- housings and simplified catalogue names: PHR-2, XH-4, PHR-2-VS
- board headers: B2B-PH-K-S (top entry), S2B-PH-SM4-TB (side entry),
  SM04B-SRSS-TB / BM04B-GHS-TBT (SMT headers for SH / GH)
"""

import re
from typing import Any

from ..component_types import ComponentType
from ..mpn import clean_mpn
from .base import ManufacturerHandler

_HOUSING = re.compile(r"^(PH|XH|SH|GH|ZH|EH)([RSDL]?)-([0-9]+)(?:-([0-9A-Z]+))?$")
_HEADER = re.compile(r"^([BS])([0-9]+)B-(PH|XH|EH|ZH)-([0-9A-Z-]+)$")
_SMT_HEADER = re.compile(r"^(SM|BM)([0-9]+)B-(SRSS|GHS)-([0-9A-Z-]+)$")

_SMT_HEADER_FAMILIES = {"SRSS": "SH", "GHS": "GH"}

# Contact pitch in mm
SERIES_PITCH = {
    "PH": 2.0,
    "XH": 2.5,
    "SH": 1.0,
    "GH": 1.25,
    "ZH": 1.5,
    "EH": 2.5,
}

# Rated current per contact in A
SERIES_CURRENT = {
    "PH": 3.0,
    "XH": 3.0,
    "SH": 1.0,
    "GH": 1.0,
    "ZH": 1.0,
    "EH": 3.0,
}


class JSTHandler(ManufacturerHandler):
    name = "jst"
    manufacturer = "JST"

    PATTERNS = {
        ComponentType.CONNECTOR_JST: (
            _HOUSING.pattern,
            _HEADER.pattern,
            _SMT_HEADER.pattern,
        ),
    }

    def _parse(self, mpn: str | None) -> dict[str, Any] | None:
        """Split an MPN into family, pin count, style suffix, mounting, gender, orientation."""
        mpn = clean_mpn(mpn)
        match = _HOUSING.match(mpn)
        if match:
            family, variant, pins, style = match.groups()
            style = style or ""
            return {
                "family": family,
                "pins": int(pins),
                "style": style or None,
                "mounting": "SMT" if "S" in style else "THT",
                "gender": "female" if variant == "R" else "male",
                "orientation": "right_angle" if "R" in style else "vertical",
                "rows": 2 if variant == "D" else 1,
            }
        match = _HEADER.match(mpn)
        if match:
            entry, pins, family, style = match.groups()
            return {
                "family": family,
                "pins": int(pins),
                "style": style,
                "mounting": "SMT" if "SM" in style else "THT",
                "gender": "male",
                "orientation": "right_angle" if entry == "S" else "vertical",
                "rows": 1,
            }
        match = _SMT_HEADER.match(mpn)
        if match:
            entry, pins, code, style = match.groups()
            return {
                "family": _SMT_HEADER_FAMILIES[code],
                "pins": int(pins),
                "style": style,
                "mounting": "SMT",
                "gender": "male",
                "orientation": "right_angle" if entry == "SM" else "vertical",
                "rows": 1,
            }
        return None

    def extract_series(self, mpn: str | None) -> str | None:
        """'PHR-2' -> 'PH', 'SM04B-SRSS-TB' -> 'SH', 'PH' -> 'PH'"""
        if clean_mpn(mpn) in SERIES_PITCH:
            return clean_mpn(mpn)
        parsed = self._parse(mpn)
        return parsed["family"] if parsed else None

    def extract_package_code(self, mpn: str | None) -> str | None:
        """Mounting style suffix: 'PHR-2-VS' -> 'VS', 'B2B-PH-K-S' -> 'K-S'"""
        parsed = self._parse(mpn)
        return parsed["style"] if parsed else None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        parsed = self._parse(mpn)
        if not parsed:
            return {}
        family = parsed["family"]
        return {
            "pins": parsed["pins"],
            "pitch": SERIES_PITCH[family],
            "current_rating": SERIES_CURRENT[family],
            "mounting": parsed["mounting"],
            "gender": parsed["gender"],
            "orientation": parsed["orientation"],
            "rows": parsed["rows"],
            "keyed": True,  # Every JST family here has a polarized housing
        }
