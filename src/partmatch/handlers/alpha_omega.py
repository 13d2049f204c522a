"""Alpha & Omega Semiconductor (AOS) power MOSFETs.

AOS encodes the package in the prefix: AOD = TO-252, AOT = TO-220, AO3xxx =
SOT-23 and so on. Four-letter prefixes (AOTL, AONS, ...) must be resolved
before the three-letter ones they contain, and the bare AO + digits rule only
applies once every lettered prefix has been ruled out.
"""

import re

from ..component_types import ComponentType
from ..mpn import clean_mpn
from .base import ManufacturerHandler

# Ordered longest prefix first; (prefix regex, package)
_PACKAGE_PREFIXES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"^AOTL"), "TOLL"),
    (re.compile(r"^AOGT"), "GTPAK"),
    (re.compile(r"^AOGL"), "GLPAK"),
    (re.compile(r"^AONK"), "DFN3.3x3.3"),
    (re.compile(r"^AON[SR]"), "DFN"),
    (re.compile(r"^AO3[0-9]"), "SOT-23"),
    (re.compile(r"^AO4[0-9]"), "SO-8"),
    (re.compile(r"^AOD"), "TO-252"),
    (re.compile(r"^AON"), "DFN"),
    (re.compile(r"^AOI"), "TO-251"),
    (re.compile(r"^AOT"), "TO-220"),
    (re.compile(r"^AOB"), "TO-263"),
    (re.compile(r"^AOC"), "SO-8"),
    (re.compile(r"^AOP"), "PDFN"),
]

# Series = prefix + digit run of the part before any hyphenated suffix
_SERIES_PATTERN = re.compile(r"^(AOTL|AOGT|AOGL|AONS|AONR|AONK|AOD|AON|AOI|AOT|AOB|AOC|AOP|AO)([0-9]+)[A-Z]*$")


class AlphaOmegaHandler(ManufacturerHandler):
    name = "alpha_omega"
    manufacturer = "Alpha & Omega Semiconductor"

    PATTERNS = {
        ComponentType.MOSFET_AOS: (
            r"^AOTL[0-9]{3,5}[A-Z]?(-.*)?$",
            r"^AOGT[0-9]{3,5}[A-Z]?(-.*)?$",
            r"^AOGL[0-9]{3,5}[A-Z]?(-.*)?$",
            r"^AONK[0-9]{3,5}[A-Z]?(-.*)?$",
            r"^AONS[0-9]{3,5}[A-Z]?(-.*)?$",
            r"^AONR[0-9]{3,5}[A-Z]?(-.*)?$",
            r"^AO3[0-9]{3}[A-Z]?(-.*)?$",
            r"^AO4[0-9]{3}[A-Z]?(-.*)?$",
            r"^AOD[0-9]{3,5}[A-Z]{0,2}(-.*)?$",
            r"^AON[0-9]{3,4}[A-Z]?(-.*)?$",
            r"^AOI[0-9]{3,4}[A-Z]?(-.*)?$",
            r"^AOT[0-9]{3,5}[A-Z]{0,2}(-.*)?$",
            r"^AOB[0-9]{3,5}[A-Z]{0,2}(-.*)?$",
            r"^AOC[0-9]{3,4}[A-Z]?(-.*)?$",
            r"^AOP[0-9]{3,4}[A-Z]?(-.*)?$",
            r"^AO[0-9]{4,5}[A-Z]?(-.*)?$",
        ),
    }

    def extract_package_code(self, mpn: str | None) -> str | None:
        mpn = clean_mpn(mpn)
        for pattern, package in _PACKAGE_PREFIXES:
            if pattern.match(mpn):
                return package
        return None

    def extract_series(self, mpn: str | None) -> str | None:
        """'AOD4184A' -> 'AOD4184', 'AOTL66912-TR' -> 'AOTL66912'"""
        base = clean_mpn(mpn).split("-", 1)[0]
        match = _SERIES_PATTERN.match(base)
        if not match:
            return None
        return match.group(1) + match.group(2)
