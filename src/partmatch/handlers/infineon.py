"""Infineon (incl. International Rectifier) power MOSFETs."""

import re
from typing import Any

from ..component_types import ComponentType
from ..mpn import clean_mpn
from .base import ManufacturerHandler

# Lead-free / tape-and-reel decorations appended to legacy IR part numbers
_IR_DECORATION = re.compile(r"(TRL|TRR|TR)?PBF$")
_IR_SERIES = re.compile(r"^(IR[FL][A-Z]?[0-9]+)")
_OPTIMOS_SERIES = re.compile(r"^((?:IPP|IPB|IPD|BSC)[0-9]+N[0-9]+[A-Z]*[0-9]?)")

# Legacy IRF/IRL parts carry the package as the final letter
_IR_PACKAGE_LETTERS = {
    "N": "TO-220",
    "L": "TO-262",
    "S": "D2PAK",
    "U": "IPAK",
    "P": "TO-247",
    "B": "TO-263",
    "E": "TO-220AB",
}

_OPTIMOS_PACKAGES = {
    "IPP": "TO-220",
    "IPB": "TO-263",
    "IPD": "TO-252",
    "BSC": "TDSON-8",
}


class InfineonHandler(ManufacturerHandler):
    name = "infineon"
    manufacturer = "Infineon Technologies"

    PATTERNS = {
        ComponentType.MOSFET_INFINEON: (
            r"^IRF[0-9].*",  # Standard HEXFET
            r"^IRL[0-9].*",  # Logic level
            r"^IRFP[0-9].*",  # TO-247 power
            r"^IRFB[0-9].*",
            r"^IRFZ[0-9].*",
            r"^IRLZ[0-9].*",
            r"^IPP[0-9].*",  # OptiMOS
            r"^IPB[0-9].*",
            r"^IPD[0-9].*",
            r"^BSC[0-9].*",
        ),
    }

    def _strip_decoration(self, mpn: str) -> str:
        return _IR_DECORATION.sub("", clean_mpn(mpn).replace(" ", ""))

    def extract_package_code(self, mpn: str | None) -> str | None:
        mpn = self._strip_decoration(mpn)
        if not mpn:
            return None
        prefix = mpn[:3]
        if prefix in _OPTIMOS_PACKAGES:
            return _OPTIMOS_PACKAGES[prefix]
        if mpn.startswith("IRFP"):
            return "TO-247"
        if mpn.startswith(("IRF", "IRL")) and mpn[-1].isalpha():
            return _IR_PACKAGE_LETTERS.get(mpn[-1])
        return None

    def extract_series(self, mpn: str | None) -> str | None:
        """'IRF530NPBF' -> 'IRF530', 'IPP060N06N3 G' -> 'IPP060N06N3'"""
        mpn = self._strip_decoration(mpn)
        for pattern in (_OPTIMOS_SERIES, _IR_SERIES):
            match = pattern.match(mpn)
            if match:
                return match.group(1)
        return None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        series = self.extract_series(mpn)
        if not series:
            return {}
        # IR numbering: the 9xxx range is P-channel (IRF9540 is the complement of IRF540)
        channel = "P" if re.match(r"^IR[FL][A-Z]?9", series) else "N"
        return {"channel": channel}
