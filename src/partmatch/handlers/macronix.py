"""Macronix MX25 serial NOR flash."""

import re
from typing import Any

from ..component_types import ComponentType
from ..mpn import clean_mpn, longest_prefix
from .base import ManufacturerHandler

# MX25L12835FM2I-10G: density + revision digits, revision letter, package, grade, speed grade
_PARTS = re.compile(r"^(MX25[LRUV])([0-9]+)([A-Z])?([A-Z0-9]*)(?:-[0-9]+[A-Z]*)?$")

# Leading digits give the density in Mbit; trailing digits are the revision
_DENSITIES_MBIT = ("512", "256", "128", "64", "32", "16", "8", "4", "2", "1")

_PACKAGE_CODES = {
    "M1": "SOIC-8",
    "M2": "SOIC-8 208mil",
    "MI": "SOIC-16",
    "Z2": "WSON-8",
    "ZN": "WSON-8",
    "Z4": "WSON-8 8x6",
    "XC": "BGA-24",
}

_SUPPLY_VOLTAGE = {"MX25L": 3.3, "MX25V": 3.3, "MX25R": 3.3, "MX25U": 1.8}


class MacronixHandler(ManufacturerHandler):
    name = "macronix"
    manufacturer = "Macronix"

    PATTERNS = {
        ComponentType.MEMORY_FLASH_MACRONIX: (
            r"^MX25[LRUV][0-9]+[A-Z0-9]*(-[0-9]+[A-Z]*)?$",
        ),
    }
    PACKAGE_CODES = _PACKAGE_CODES

    def _density_digits(self, digits: str) -> str | None:
        return longest_prefix(digits, _DENSITIES_MBIT)

    def extract_series(self, mpn: str | None) -> str | None:
        """'MX25L12835FM2I-10G' -> 'MX25L128'"""
        match = _PARTS.match(clean_mpn(mpn))
        if not match:
            return None
        density = self._density_digits(match.group(2))
        return match.group(1) + density if density else None

    def extract_package_code(self, mpn: str | None) -> str | None:
        match = _PARTS.match(clean_mpn(mpn))
        if not match or not match.group(4):
            return None
        code = longest_prefix(match.group(4), self.PACKAGE_CODES)
        return self.PACKAGE_CODES[code] if code else None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        match = _PARTS.match(clean_mpn(mpn))
        if not match:
            return {}
        attrs: dict[str, Any] = {
            "interface": "SPI",
            "supply_voltage": _SUPPLY_VOLTAGE[match.group(1)],
        }
        density = self._density_digits(match.group(2))
        if density:
            attrs["density_kbit"] = int(density) * 1024
        return attrs
