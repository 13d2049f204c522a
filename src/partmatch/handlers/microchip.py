"""Microchip (incl. Atmel) serial EEPROMs."""

import re
from typing import Any

from ..component_types import ComponentType
from ..mpn import clean_mpn
from .base import ManufacturerHandler

# 24LC256-I/SN, 25AA512T-E/ST, AT24C256C-SSHL-T, AT24CM01-XHM
_PARTS = re.compile(r"^(24LC|24AA|24FC|25LC|25AA|AT24CM|AT24C|AT25)([0-9]+)([A-Z]?)")

# Microchip package code after the temperature grade slash (-I/SN)
_SLASH_PACKAGES = {
    "P": "DIP",
    "SN": "SOIC",
    "SM": "SOIC",
    "SE": "SOIC-Wide",
    "ST": "TSSOP",
    "MS": "MSOP",
    "MF": "DFN",
    "MNY": "TDFN",
    "MN": "WDFN",
    "OT": "SOT-23",
}

# Atmel ordering code after the first hyphen (AT24C256C-SSHL-T)
_ATMEL_PACKAGES = {
    "SSH": "SOIC",
    "SH": "SOIC",
    "PU": "DIP",
    "XH": "TSSOP",
    "MAH": "UDFN",
    "STU": "SOT-23",
}

# Densities that are not spelled out as a plain kbit count
_DENSITY_OVERRIDES = {
    ("AT24CM", "01"): 1024,
    ("AT24CM", "02"): 2048,
    ("24LC", "1025"): 1024,
    ("24LC", "1026"): 1024,
    ("24AA", "1025"): 1024,
    ("24FC", "1025"): 1024,
}

# Maximum I2C/SPI clock by family prefix (kHz); 24FC is the 1 MHz grade
_MAX_CLOCK_KHZ = {
    "24AA": 400,
    "24LC": 400,
    "24FC": 1000,
    "AT24C": 1000,
    "AT24CM": 1000,
    "25AA": 10000,
    "25LC": 10000,
    "AT25": 20000,
}


class MicrochipHandler(ManufacturerHandler):
    name = "microchip"
    manufacturer = "Microchip Technology"

    PATTERNS = {
        ComponentType.MEMORY_EEPROM_MICROCHIP: (
            r"^24(LC|AA|FC)[0-9]+[A-Z]?(T?-[A-Z]/[A-Z]{1,3})?$",
            r"^25(LC|AA)[0-9]+[A-Z]?(T?-[A-Z]/[A-Z]{1,3})?$",
            r"^AT24C[0-9]+[A-Z]?(-[A-Z0-9-]+)?$",
            r"^AT24CM[0-9]{2}(-[A-Z0-9-]+)?$",
            r"^AT25[0-9]+[A-Z]?(-[A-Z0-9-]+)?$",
        ),
    }

    def extract_series(self, mpn: str | None) -> str | None:
        """'24LC256-I/SN' -> '24LC256', 'AT24C256C-SSHL-T' -> 'AT24C256'"""
        match = _PARTS.match(clean_mpn(mpn))
        return match.group(1) + match.group(2) if match else None

    def extract_package_code(self, mpn: str | None) -> str | None:
        mpn = clean_mpn(mpn)
        if "/" in mpn:
            return _SLASH_PACKAGES.get(mpn.rsplit("/", 1)[1])
        if mpn.startswith("AT") and "-" in mpn:
            code = mpn.split("-")[1]
            for length in range(len(code), 0, -1):
                if code[:length] in _ATMEL_PACKAGES:
                    return _ATMEL_PACKAGES[code[:length]]
        return None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        match = _PARTS.match(clean_mpn(mpn))
        if not match:
            return {}
        prefix, digits = match.group(1), match.group(2)
        density = _DENSITY_OVERRIDES.get((prefix, digits), int(digits))
        return {
            "interface": "I2C" if "24" in prefix else "SPI",
            "density_kbit": density,
            "max_clock_khz": _MAX_CLOCK_KHZ[prefix],
        }
