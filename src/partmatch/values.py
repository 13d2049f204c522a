"""Numeric attribute parsers for codes embedded in MPNs.

Unlike MPN matching (where absence is a normal outcome), these parsers are
strict: they are only called on codes a handler has already isolated, so a
value they cannot interpret means a caller or table bug and raises
InvalidAttributeError.
"""

import re
from typing import Any


class InvalidAttributeError(ValueError):
    """An attribute code could not be interpreted as a numeric value."""

    def __init__(self, attribute: str, value: Any):
        self.attribute = attribute
        self.value = value
        super().__init__(f"Invalid {attribute} value: {value!r}")


# =============================================================================
# CODE TABLES
# =============================================================================

# EIA two-character rated voltage codes (Murata, Nichicon, Panasonic, ...)
EIA_VOLTAGE_CODES: dict[str, float] = {
    "0E": 2.5, "0G": 4.0, "0J": 6.3,
    "1A": 10.0, "1C": 16.0, "1E": 25.0, "1V": 35.0, "1H": 50.0, "1J": 63.0, "1K": 80.0,
    "2A": 100.0, "2C": 160.0, "2D": 200.0, "2E": 250.0, "2V": 350.0, "2G": 400.0,
    "2W": 450.0, "2H": 500.0, "2J": 630.0, "3A": 1000.0,
}

# Tolerance letters in percent
TOLERANCE_CODES: dict[str, float] = {
    "A": 0.05, "B": 0.1, "C": 0.25, "D": 0.5, "F": 1.0, "G": 2.0,
    "J": 5.0, "K": 10.0, "M": 20.0,
}

# Imperial (inch) chip size -> metric (mm) code
IMPERIAL_TO_METRIC: dict[str, str] = {
    "01005": "0402",
    "0201": "0603",
    "0402": "1005",
    "0603": "1608",
    "0805": "2012",
    "1206": "3216",
    "1210": "3225",
    "1812": "4532",
    "2010": "5025",
    "2220": "5750",
    "2512": "6332",
}

_RESISTANCE_CODE_PATTERN = re.compile(r"^(\d*)([RKM])(\d*)$")
_RESISTANCE_PLAIN_PATTERN = re.compile(r"^\d+(?:\.\d+)?$")
_CAPACITANCE_CODE_PATTERN = re.compile(r"^(\d)(\d)(\d)$")
_CAPACITANCE_DECIMAL_PATTERN = re.compile(r"^(\d*)R(\d+)$")

_RESISTANCE_MULTIPLIERS = {"R": 1.0, "K": 1e3, "M": 1e6}


def _require_code(attribute: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidAttributeError(attribute, value)
    return value.strip().upper()


# =============================================================================
# PARSERS
# =============================================================================


def parse_voltage_code(code: str) -> float:
    """Parse an EIA voltage code in volts: '1E' -> 25.0, '0J' -> 6.3"""
    code = _require_code("voltage", code)
    try:
        return EIA_VOLTAGE_CODES[code]
    except KeyError:
        raise InvalidAttributeError("voltage", code) from None


def parse_tolerance_code(code: str) -> float:
    """Parse a tolerance letter in percent: 'F' -> 1.0, 'K' -> 10.0"""
    code = _require_code("tolerance", code)
    try:
        return TOLERANCE_CODES[code]
    except KeyError:
        raise InvalidAttributeError("tolerance", code) from None


def parse_resistance_code(code: str) -> float:
    """Parse a resistance code in ohms: '10K' -> 10000, '4K7' -> 4700, '0R' -> 0, '1R5' -> 1.5"""
    code = _require_code("resistance", code)
    if _RESISTANCE_PLAIN_PATTERN.match(code):
        return float(code)
    match = _RESISTANCE_CODE_PATTERN.match(code)
    if not match or not (match.group(1) or match.group(3)):
        raise InvalidAttributeError("resistance", code)
    whole, unit, fraction = match.groups()
    value = float(f"{whole or '0'}.{fraction or '0'}")
    return value * _RESISTANCE_MULTIPLIERS[unit]


def parse_capacitance_code(code: str, unit: float = 1e-12) -> float:
    """Parse a three-digit capacitance code in farads.

    The code is two significant digits plus a multiplier, expressed in `unit`
    (picofarads for ceramics, microfarads for electrolytics):
    '104' -> 1e-7 (100nF), '4R7' -> 4.7e-12, '101' with unit=1e-6 -> 1e-4 (100uF)
    """
    code = _require_code("capacitance", code)
    match = _CAPACITANCE_CODE_PATTERN.match(code)
    if match:
        first, second, exponent = match.groups()
        significant = int(first + second)
        exponent = int(exponent)
        # EIA-198: multiplier digits 8 and 9 mean 0.01 and 0.1
        if exponent == 8:
            multiplier = 0.01
        elif exponent == 9:
            multiplier = 0.1
        else:
            multiplier = 10 ** exponent
        return significant * multiplier * unit
    match = _CAPACITANCE_DECIMAL_PATTERN.match(code)
    if match:
        whole, fraction = match.groups()
        return float(f"{whole or '0'}.{fraction}") * unit
    raise InvalidAttributeError("capacitance", code)


def imperial_to_metric(size: str) -> str:
    """Convert an imperial chip size code to metric: '0603' -> '1608'"""
    size = _require_code("size", size)
    try:
        return IMPERIAL_TO_METRIC[size]
    except KeyError:
        raise InvalidAttributeError("size", size) from None


def values_match(first: float, second: float, tolerance: float = 0.02) -> bool:
    """Compare two parsed values with a relative tolerance."""
    if not isinstance(first, (int, float)) or not isinstance(second, (int, float)):
        raise InvalidAttributeError("numeric", (first, second))
    scale = max(abs(first), abs(second))
    if scale == 0:
        return True
    return abs(first - second) / scale < tolerance
