"""onsemi (incl. Fairchild and Catalyst): op-amps, BJTs, MOSFETs, diodes, regulators, EEPROMs."""

import re
from typing import Any

from ..component_types import ComponentType
from ..families import diode_profile, opamp_profile, regulator_profile, transistor_profile
from ..mpn import clean_mpn
from .base import ManufacturerHandler

# onsemi ordering suffixes: R2 = tape and reel, G = Pb-free
_ORDERING_SUFFIX = re.compile(r"(R2)?G$")
_SERIES = re.compile(
    r"^(MC1458|MC3403|MC741|LM358|LM324|LM2904|MC7[89][LM]?[0-9]{2}|NCP[0-9]{3,4}"
    r"|2N[0-9]{4}|PN[0-9]{4}|MMBT[0-9]{4}|MPSA[0-9]{2}|BC[0-9]{3}"
    r"|NTD[0-9]+N?|FQP[0-9]+[NP][0-9]+|FDP[0-9]+|NTP[0-9]+N?"
    r"|MUR[0-9]+|MBRS?[0-9]+|RL20[1-7]|1N400[1-7]|1N4148|1N914|1N47[2-4][0-9]"
    r"|CAT24C[0-9]+|CAT25[0-9]+)"
)
_CAT_PARTS = re.compile(r"^CAT(24C|25)([0-9]+)([A-Z]*)")

# Channel letter between the current and voltage digits (FQP30N06L, NTD4906N)
_MOSFET_CHANNEL = re.compile(r"^(?:FQP|FDP|NTD|NTP)[0-9]+([NP])")

# Package by part prefix (discretes encode the package in the prefix)
_PREFIX_PACKAGES = [
    ("MMBT", "SOT-23"),
    ("2N7002", "SOT-23"),
    ("PN", "TO-92"),
    ("MPSA", "TO-92"),
    ("BC", "TO-92"),
    ("2N2", "TO-18"),
    ("2N", "TO-92"),
    ("NTD", "DPAK"),
    ("FQP", "TO-220"),
    ("FDP", "TO-220"),
    ("NTP", "TO-220"),
    ("MBRS", "SMB"),
    ("MUR", "DO-201"),
    ("RL20", "DO-15"),
    ("1N400", "DO-41"),
    ("1N47", "DO-41"),
    ("1N4148", "DO-35"),
    ("1N914", "DO-35"),
]

# Package code letters following an IC stem (MC1458DR2G -> D)
_PACKAGE_CODES = {
    "N": "DIP",
    "P": "DIP",
    "D": "SOIC",
    "DW": "SOIC-Wide",
    "DTB": "TSSOP",
    "DT": "DPAK",
    "BT": "TO-220",
    "T": "TO-220",
    "FP": "TO-220F",
    "CT": "TO-220",
    "CDT": "DPAK",
    "CD2T": "D2PAK",
}

# Catalyst EEPROM package letters
_CAT_PACKAGES = {
    "W": "SOIC",
    "Y": "TSSOP",
    "L": "PDIP",
    "HU": "UDFN",
    "VP": "TDFN",
    "TD": "TSOT-23",
}


class OnsemiHandler(ManufacturerHandler):
    name = "onsemi"
    manufacturer = "onsemi"

    PATTERNS = {
        ComponentType.OPAMP_ONSEMI: (
            r"^MC1458[A-Z0-9]*$",
            r"^MC3403[A-Z0-9]*$",
            r"^MC741[A-Z0-9]*$",
            r"^LM358[A-Z0-9]*$",  # Second-source; TI is registered first and wins
            r"^LM324[A-Z0-9]*$",
            r"^LM2904[A-Z0-9]*$",
        ),
        ComponentType.TRANSISTOR_ONSEMI: (
            r"^2N(?!7)[0-9]{4}[A-Z]?.*",  # 2N7xxx are small-signal MOSFETs
            r"^PN[0-9]{4}[A-Z]?.*",
            r"^MMBT[0-9]{4}[A-Z]?.*",
            r"^MPSA[0-9]{2}[A-Z]?.*",
            r"^BC[0-9]{3}[A-C]?.*",
        ),
        ComponentType.MOSFET_ONSEMI: (
            r"^2N7[0-9]{3}[A-Z]?.*",
            r"^NTD[0-9]+[A-Z]?.*",
            r"^FQP[0-9]+[A-Z]?.*",
            r"^FDP[0-9]+[A-Z]?.*",
            r"^NTP[0-9]+[A-Z]?.*",
        ),
        ComponentType.DIODE_ONSEMI: (
            r"^MUR[0-9]+[A-Z]?.*",
            r"^MBRS?[0-9]+[A-Z]?.*",
            r"^RL20[1-7][A-Z]?.*",
            r"^1N400[1-7][A-Z]?.*",
            r"^1N4148[A-Z]*.*",
            r"^1N914[A-Z]?.*",
            r"^1N47[2-4][0-9]A?.*",
        ),
        ComponentType.VOLTAGE_REGULATOR_ONSEMI: (
            r"^MC78[LM]?[0-9]{2}[A-Z]?.*",
            r"^MC79[LM]?[0-9]{2}[A-Z]?.*",
            r"^NCP[0-9]{3,4}.*",
        ),
        ComponentType.MEMORY_EEPROM_ONSEMI: (
            r"^CAT24C[0-9]+.*",
            r"^CAT25[0-9]+.*",
        ),
    }
    PACKAGE_CODES = _PACKAGE_CODES

    def extract_series(self, mpn: str | None) -> str | None:
        """'MC1458DR2G' -> 'MC1458', '2N2222A' -> '2N2222', 'CAT24C256WI-GT3' -> 'CAT24C256'"""
        match = _SERIES.match(clean_mpn(mpn))
        return match.group(1) if match else None

    def extract_package_code(self, mpn: str | None) -> str | None:
        mpn = clean_mpn(mpn)
        cat = _CAT_PARTS.match(mpn)
        if cat:
            letters = cat.group(3)
            for length in (2, 1):
                if letters[:length] in _CAT_PACKAGES:
                    return _CAT_PACKAGES[letters[:length]]
            return None
        for prefix, package in _PREFIX_PACKAGES:
            if mpn.startswith(prefix):
                return package
        series = self.extract_series(mpn)
        if not series:
            return None
        tail = _ORDERING_SUFFIX.sub("", mpn[len(series):])
        for length in range(len(tail), 0, -1):
            if tail[:length] in self.PACKAGE_CODES:
                return self.PACKAGE_CODES[tail[:length]]
        return None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        mpn = clean_mpn(mpn)
        cat = _CAT_PARTS.match(mpn)
        if cat:
            return {
                "interface": "I2C" if cat.group(1) == "24C" else "SPI",
                "density_kbit": int(cat.group(2)),
            }
        if mpn.startswith("2N7"):
            return {"channel": "N"}
        channel = _MOSFET_CHANNEL.match(mpn)
        if channel:
            return {"channel": channel.group(1)}
        series = self.extract_series(mpn)
        if not series:
            return {}
        return (
            opamp_profile(series)
            or transistor_profile(series)
            or diode_profile(series)
            or regulator_profile(series)
        )
