"""ISSI asynchronous SRAM (IS61/IS62/IS64) and serial flash (IS25LP/IS25WP)."""

import re
from typing import Any

from ..component_types import ComponentType
from ..mpn import clean_mpn, longest_prefix
from .base import ManufacturerHandler

# IS61WV25616BLL-10TLI: family, organization (depth + width), revision, speed, package/grade
_SRAM_PARTS = re.compile(r"^(IS6[124][A-Z]{1,2})([0-9]+)([A-Z]*)(?:-([0-9]+)([A-Z]*))?$")
_ORGANIZATION = re.compile(r"^([0-9]+?)(08|16|32|8)$")

# IS25LP128F-JBLE
_FLASH_PARTS = re.compile(r"^(IS25[LW]P)([0-9]+)([A-Z]?)(?:-([A-Z]+))?$")

_SRAM_PACKAGES = {
    "TL": "TSOP-II",
    "T": "TSOP",
    "B": "BGA",
    "K": "SOJ",
    "U": "SOIC",
    "V": "TSSOP",
    "L": "PLCC",
}

_FLASH_PACKAGES = {
    "JB": "SOIC-8",
    "JN": "SOIC-8",
    "JK": "WSON-8",
    "JF": "SOIC-8 208mil",
    "JM": "SOIC-16",
}


class IssiHandler(ManufacturerHandler):
    name = "issi"
    manufacturer = "ISSI"

    PATTERNS = {
        ComponentType.MEMORY_SRAM_ISSI: (
            r"^IS6[124][A-Z]{1,2}[0-9]+[A-Z]*-[0-9]+[A-Z]*$",
        ),
        ComponentType.MEMORY_FLASH_ISSI: (
            r"^IS25[LW]P[0-9]+[A-Z]?(-[A-Z]+)?$",
        ),
    }

    def extract_series(self, mpn: str | None) -> str | None:
        """'IS61WV25616BLL-10TLI' -> 'IS61WV25616', 'IS25LP128F-JBLE' -> 'IS25LP128'"""
        mpn = clean_mpn(mpn)
        match = _SRAM_PARTS.match(mpn) or _FLASH_PARTS.match(mpn)
        return match.group(1) + match.group(2) if match else None

    def extract_package_code(self, mpn: str | None) -> str | None:
        mpn = clean_mpn(mpn)
        match = _SRAM_PARTS.match(mpn)
        if match:
            if not match.group(5):
                return None
            code = longest_prefix(match.group(5), _SRAM_PACKAGES)
            return _SRAM_PACKAGES[code] if code else None
        match = _FLASH_PARTS.match(mpn)
        if match and match.group(4):
            code = longest_prefix(match.group(4), _FLASH_PACKAGES)
            return _FLASH_PACKAGES[code] if code else None
        return None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        mpn = clean_mpn(mpn)
        match = _SRAM_PARTS.match(mpn)
        if match:
            organization, revision = match.group(2), match.group(3)
            # ALL / EALL revisions are the 1.65-2.2V variants
            attrs: dict[str, Any] = {
                "interface": "parallel",
                "supply_voltage": 1.8 if revision.endswith("ALL") else 3.3,
            }
            if match.group(4):
                attrs["speed_ns"] = int(match.group(4))
            org = _ORGANIZATION.match(organization)
            if org:
                depth_k, width = int(org.group(1)), int(org.group(2))
                attrs["organization"] = f"{depth_k}Kx{width}"
                attrs["density_kbit"] = depth_k * width
            return attrs
        match = _FLASH_PARTS.match(mpn)
        if match:
            return {
                "interface": "SPI",
                "density_kbit": int(match.group(2)) * 1024,
                "supply_voltage": 3.3 if match.group(1) == "IS25LP" else 1.8,
            }
        return {}
