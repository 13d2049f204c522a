"""Winbond serial NOR/NAND flash (W25Q, W25X, W25N) and parallel NOR (W29)."""

import re
from typing import Any

from ..component_types import ComponentType
from ..mpn import clean_mpn, longest_prefix
from ..registry import PatternRegistry
from .base import ManufacturerHandler

_SERIAL_FLASH = re.compile(r"^W25[QNX][0-9]+[A-Z0-9]*$")
_PARALLEL_FLASH = re.compile(r"^W29[A-Z]{1,2}[0-9]+[A-Z0-9-]*$")

# W25Q128JVSIQ: family, density, voltage/revision letters, package + grade
_SERIAL_PARTS = re.compile(r"^(W25[QXN])([0-9]+)([A-Z]{2})?([A-Z0-9]*)$")
_PARALLEL_PARTS = re.compile(r"^(W29[A-Z]{1,2})([0-9]+)")

_PACKAGE_CODES = {
    "SS": "SOIC-8",
    "SF": "SOIC-16",
    "S": "SOIC-8 208mil",
    "SN": "SOIC-8",
    "ZP": "WSON-8",
    "ZE": "WSON-8",
    "DA": "PDIP-8",
    "TB": "TFBGA-24",
    "UX": "USON-8",
    "XG": "XSON-8",
}

# Revision letters that mark 1.8V parts
_LOW_VOLTAGE_REVISIONS = ("JW", "FW", "DW", "NW")


class WinbondHandler(ManufacturerHandler):
    name = "winbond"
    manufacturer = "Winbond Electronics"

    PATTERNS = {
        ComponentType.MEMORY_FLASH_WINBOND: (
            _SERIAL_FLASH.pattern,
            _PARALLEL_FLASH.pattern,
        ),
    }
    PACKAGE_CODES = _PACKAGE_CODES

    def matches(self, mpn: str | None, component_type: ComponentType, registry: PatternRegistry) -> bool:
        # Winbond only makes flash here, so the check skips the registry
        mpn = clean_mpn(mpn)
        if not mpn or component_type is None:
            return False
        if not ComponentType.MEMORY_FLASH_WINBOND.is_a(component_type):
            return False
        return bool(_SERIAL_FLASH.match(mpn) or _PARALLEL_FLASH.match(mpn))

    def extract_series(self, mpn: str | None) -> str | None:
        """'W25Q128JVSIQ' -> 'W25Q128'"""
        mpn = clean_mpn(mpn)
        match = _SERIAL_PARTS.match(mpn) or _PARALLEL_PARTS.match(mpn)
        return match.group(1) + match.group(2) if match else None

    def extract_package_code(self, mpn: str | None) -> str | None:
        match = _SERIAL_PARTS.match(clean_mpn(mpn))
        if not match or not match.group(4):
            return None
        code = longest_prefix(match.group(4), self.PACKAGE_CODES)
        return self.PACKAGE_CODES[code] if code else None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        mpn = clean_mpn(mpn)
        match = _SERIAL_PARTS.match(mpn)
        if match:
            family, digits, revision = match.group(1), int(match.group(2)), match.group(3) or ""
            # W25Q/W25X densities are in Mbit, W25N in Gbit
            density = digits * 1024 * (1024 if family == "W25N" else 1)
            return {
                "interface": "SPI",
                "density_kbit": density,
                "supply_voltage": 1.8 if revision in _LOW_VOLTAGE_REVISIONS else 3.3,
            }
        match = _PARALLEL_PARTS.match(mpn)
        if match:
            return {"interface": "parallel", "density_kbit": int(match.group(2)) * 1024}
        return {}
