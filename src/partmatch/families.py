"""Curated equivalence families and part characteristic tables.

Families are closed sets of MPN stems known to be interchangeable across
manufacturers. Lookup is by longest stem prefix of the normalized MPN, so
'LM358DR' lands in the LM358 family and 'TL072CP' in the TL072 one.
"""

import re
from dataclasses import dataclass

from .component_types import ComponentType
from .mpn import longest_prefix, normalize_mpn


@dataclass(frozen=True)
class EquivalenceFamily:
    """A named set of interchangeable MPN stems within one category."""
    name: str
    category: ComponentType
    members: frozenset[str]

    def stem_of(self, mpn: str) -> str | None:
        return longest_prefix(normalize_mpn(mpn), self.members)


def _family(name: str, category: ComponentType, *members: str) -> EquivalenceFamily:
    return EquivalenceFamily(name, category, frozenset(m.upper() for m in members))


# =============================================================================
# FAMILY TABLES
# =============================================================================

OPAMP_FAMILIES: tuple[EquivalenceFamily, ...] = (
    _family("dual-general-purpose", ComponentType.OPAMP,
            "LM358", "LM2904", "MC1458", "LM1458", "RC4558", "TL072", "TL082", "NE5532"),
    _family("quad-general-purpose", ComponentType.OPAMP,
            "LM324", "LM2902", "MC3403", "RC4136", "TL074", "TL084"),
    _family("single-general-purpose", ComponentType.OPAMP,
            "LM741", "UA741", "MC741", "TL071", "TL081"),
)

TRANSISTOR_FAMILIES: tuple[EquivalenceFamily, ...] = (
    _family("2N2222", ComponentType.TRANSISTOR, "2N2222", "PN2222", "MMBT2222"),
    _family("2N3904", ComponentType.TRANSISTOR, "2N3904", "PN3904", "MMBT3904"),
    _family("2N4401", ComponentType.TRANSISTOR, "2N4401", "PN4401", "MMBT4401"),
    _family("BC547", ComponentType.TRANSISTOR, "BC547", "BC548"),
    _family("BC337", ComponentType.TRANSISTOR, "BC337"),
    _family("2N2907", ComponentType.TRANSISTOR, "2N2907", "PN2907", "MMBT2907"),
    _family("2N3906", ComponentType.TRANSISTOR, "2N3906", "PN3906", "MMBT3906"),
    _family("2N4403", ComponentType.TRANSISTOR, "2N4403", "PN4403", "MMBT4403"),
    _family("BC557", ComponentType.TRANSISTOR, "BC557", "BC558"),
    _family("BC327", ComponentType.TRANSISTOR, "BC327"),
)

MEMORY_FAMILIES: tuple[EquivalenceFamily, ...] = (
    _family("I2C-EEPROM-256K", ComponentType.MEMORY, "24LC256", "24AA256", "AT24C256", "M24C256", "CAT24C256"),
    _family("I2C-EEPROM-512K", ComponentType.MEMORY, "24LC512", "24AA512", "AT24C512", "M24C512", "CAT24C512"),
    _family("I2C-EEPROM-1M", ComponentType.MEMORY, "24LC1025", "24LC1026", "AT24CM01", "M24M01"),
    _family("SPI-EEPROM-256K", ComponentType.MEMORY, "25LC256", "25AA256", "AT25256", "M95256"),
    _family("SPI-FLASH-32M", ComponentType.MEMORY,
            "W25Q32", "MX25L3233F", "MX25L3206E", "S25FL032P", "AT25SF321", "IS25LP032"),
    _family("SPI-FLASH-64M", ComponentType.MEMORY,
            "W25Q64", "MX25L6433F", "MX25L6406E", "S25FL064L", "AT25SF641", "IS25LP064"),
    _family("SPI-FLASH-128M", ComponentType.MEMORY,
            "W25Q128", "MX25L12833F", "MX25L12835F", "S25FL128L", "AT25SF128A", "IS25LP128"),
)

DIODE_FAMILIES: tuple[EquivalenceFamily, ...] = (
    # RL20x is the DO-15 second source of the 1N400x rectifiers, rated suffix for suffix
    *(_family(f"1N400{n}", ComponentType.DIODE, f"1N400{n}", f"RL20{n}") for n in range(1, 8)),
    _family("1N4148", ComponentType.DIODE, "1N4148", "1N914"),
)

REGULATOR_FAMILIES: tuple[EquivalenceFamily, ...] = (
    _family("positive-adjustable", ComponentType.VOLTAGE_REGULATOR, "LM317", "LM338", "LM350"),
)

ALL_FAMILIES: tuple[EquivalenceFamily, ...] = (
    OPAMP_FAMILIES + TRANSISTOR_FAMILIES + MEMORY_FAMILIES + DIODE_FAMILIES + REGULATOR_FAMILIES
)


def find_family(mpn: str, families=ALL_FAMILIES) -> EquivalenceFamily | None:
    """Return the family whose longest member stem prefixes the MPN."""
    normalized = normalize_mpn(mpn)
    if not normalized:
        return None
    best: EquivalenceFamily | None = None
    best_length = 0
    for family in families:
        stem = longest_prefix(normalized, family.members)
        if stem and len(stem) > best_length:
            best, best_length = family, len(stem)
    return best


def same_family(mpn_a: str, mpn_b: str, families=ALL_FAMILIES) -> bool:
    family = find_family(mpn_a, families)
    return family is not None and family is find_family(mpn_b, families)


# =============================================================================
# PART CHARACTERISTICS
# =============================================================================

# Op-amp stem -> (channel count, input technology)
OPAMP_CHARACTERISTICS: dict[str, tuple[int, str]] = {
    "LM358": (2, "bipolar"),
    "LM2904": (2, "bipolar"),
    "MC1458": (2, "bipolar"),
    "LM1458": (2, "bipolar"),
    "RC4558": (2, "bipolar"),
    "NE5532": (2, "bipolar"),
    "TL072": (2, "jfet"),
    "TL082": (2, "jfet"),
    "LM324": (4, "bipolar"),
    "LM2902": (4, "bipolar"),
    "MC3403": (4, "bipolar"),
    "RC4136": (4, "bipolar"),
    "TL074": (4, "jfet"),
    "TL084": (4, "jfet"),
    "LM741": (1, "bipolar"),
    "UA741": (1, "bipolar"),
    "MC741": (1, "bipolar"),
    "TL071": (1, "jfet"),
    "TL081": (1, "jfet"),
    "OP07": (1, "bipolar"),
    "OP27": (1, "bipolar"),
    "AD8605": (1, "cmos"),
    "AD8606": (2, "cmos"),
    "AD8608": (4, "cmos"),
}


def opamp_profile(mpn: str) -> dict[str, int | str]:
    """Channel count and input technology for a known op-amp stem, else {}."""
    stem = longest_prefix(normalize_mpn(mpn), OPAMP_CHARACTERISTICS)
    if not stem:
        return {}
    channels, technology = OPAMP_CHARACTERISTICS[stem]
    return {"channels": channels, "input_type": technology}


# BJT stem -> (polarity, Vceo volts, Ic max mA)
TRANSISTOR_CHARACTERISTICS: dict[str, tuple[str, int, int]] = {
    "2N2222": ("NPN", 40, 800),
    "PN2222": ("NPN", 40, 800),
    "MMBT2222": ("NPN", 40, 600),
    "2N3904": ("NPN", 40, 200),
    "PN3904": ("NPN", 40, 200),
    "MMBT3904": ("NPN", 40, 200),
    "2N4401": ("NPN", 40, 600),
    "BC547": ("NPN", 45, 100),
    "BC548": ("NPN", 30, 100),
    "BC337": ("NPN", 45, 800),
    "2N2907": ("PNP", 40, 800),
    "PN2907": ("PNP", 40, 800),
    "MMBT2907": ("PNP", 40, 600),
    "2N3906": ("PNP", 40, 200),
    "PN3906": ("PNP", 40, 200),
    "MMBT3906": ("PNP", 40, 200),
    "2N4403": ("PNP", 40, 600),
    "BC557": ("PNP", 45, 100),
    "BC558": ("PNP", 30, 100),
    "BC327": ("PNP", 45, 800),
}


def transistor_profile(mpn: str) -> dict[str, int | str]:
    stem = longest_prefix(normalize_mpn(mpn), TRANSISTOR_CHARACTERISTICS)
    if not stem:
        return {}
    polarity, vceo, ic_ma = TRANSISTOR_CHARACTERISTICS[stem]
    return {"polarity": polarity, "vceo": vceo, "ic_ma": ic_ma}


# Sensor family prefix -> (family key, interface).
# Order matters: longer/more specific prefixes before the ones they contain.
SENSOR_PROFILES: list[tuple[re.Pattern, str, str]] = [
    (re.compile(r"^(DS18B20)"), "DS18B20", "1-Wire"),
    (re.compile(r"^(DS18S20|DS1822|DS18)"), "DS18", "1-Wire"),
    (re.compile(r"^(LM35)[A-D]"), "LM35", "analog"),
    (re.compile(r"^(TMP3[5-7])"), "TMP3X", "analog"),
    (re.compile(r"^(TMP1\d\d)"), "TMP1XX", "I2C"),
    (re.compile(r"^(MAX318\d\d)"), "MAX318XX", "SPI"),
    (re.compile(r"^(AD590)"), "AD590", "analog"),
    (re.compile(r"^(ADT7\d+)"), "ADT7XXX", "I2C"),
    (re.compile(r"^(ADXL3\d\d)"), "ADXL3XX", "SPI/I2C"),
    (re.compile(r"^(BMA\d+)"), "BMA", "I2C/SPI"),
    (re.compile(r"^(BMI\d+)"), "BMI", "I2C/SPI"),
    (re.compile(r"^(BMG\d+)"), "BMG", "I2C/SPI"),
    (re.compile(r"^(BME\d+)"), "BME", "I2C/SPI"),
    (re.compile(r"^(BMP\d+)"), "BMP", "I2C/SPI"),
    (re.compile(r"^(SHT[234]\d)"), "SHT", "I2C"),
    (re.compile(r"^(STS[34]\d)"), "STS", "I2C"),
]


def sensor_profile(mpn: str) -> dict[str, str]:
    """Family key, model stem and interface for a known sensor prefix, else {}."""
    normalized = normalize_mpn(mpn)
    for pattern, family, interface in SENSOR_PROFILES:
        match = pattern.match(normalized)
        if match:
            return {"sensor_family": family, "sensor_model": match.group(1), "interface": interface}
    return {}


# Linear regulators: 78xx / 79xx fixed (L = 100mA, M = 500mA, none = 1A) and adjustables
_FIXED_REGULATOR = re.compile(r"^(?:LM|MC|UA|KA|L)?(7[89])([LM]?)([0-9]{2})")
_FIXED_CURRENT_MA = {"L": 100, "M": 500, "": 1000}

# Adjustable stem -> (polarity, output current mA)
ADJUSTABLE_REGULATORS: dict[str, tuple[str, int]] = {
    "LM317": ("positive", 1500),
    "LM350": ("positive", 3000),
    "LM338": ("positive", 5000),
    "LM337": ("negative", 1500),
}


def regulator_profile(mpn: str) -> dict[str, str | float | int]:
    """Type, polarity, output voltage and current of a 78xx/79xx or adjustable regulator, else {}."""
    normalized = normalize_mpn(mpn)
    stem = longest_prefix(normalized, ADJUSTABLE_REGULATORS)
    if stem:
        polarity, current = ADJUSTABLE_REGULATORS[stem]
        return {"regulator_type": "adjustable", "polarity": polarity, "output_current_ma": current}
    match = _FIXED_REGULATOR.match(normalized)
    if not match:
        return {}
    series, power, voltage = match.groups()
    return {
        "regulator_type": "fixed",
        "polarity": "positive" if series == "78" else "negative",
        "output_voltage": float(int(voltage)),
        "output_current_ma": _FIXED_CURRENT_MA[power],
    }


# 1N400x / RL20x rated reverse voltage by last digit
RECTIFIER_VOLTAGES = {"1": 50, "2": 100, "3": 200, "4": 400, "5": 600, "6": 800, "7": 1000}

# 1N47xx (1 W) zener voltage by the last two digits
ZENER_VOLTAGES: dict[str, float] = {
    "28": 3.3, "29": 3.6, "30": 3.9, "31": 4.3, "32": 4.7, "33": 5.1, "34": 5.6, "35": 6.2,
    "36": 6.8, "37": 7.5, "38": 8.2, "39": 9.1, "40": 10.0, "41": 11.0, "42": 12.0, "43": 13.0,
    "44": 15.0, "45": 16.0, "46": 18.0, "47": 20.0, "48": 22.0, "49": 24.0,
}

_RECTIFIER = re.compile(r"^(?:1N400|RL20)([1-7])")
_SIGNAL_DIODE = re.compile(r"^(?:1N4148|1N914)")
_ZENER = re.compile(r"^1N47([2-4][0-9])")
_FAST_RECOVERY = re.compile(r"^MUR([0-9]{1,2})([0-9]{2})")  # MUR460: 4A, 600V
_SCHOTTKY = re.compile(r"^MBRS?([0-9]{3,5})")  # MBRS340: 3A, 40V; MBR0520: 0.5A, 20V


def diode_profile(mpn: str) -> dict[str, str | float | int]:
    """Diode type with reverse voltage, forward current or zener voltage where known, else {}."""
    normalized = normalize_mpn(mpn)
    match = _RECTIFIER.match(normalized)
    if match:
        return {
            "diode_type": "rectifier",
            "reverse_voltage": RECTIFIER_VOLTAGES[match.group(1)],
            "forward_current_ma": 1000,
        }
    if _SIGNAL_DIODE.match(normalized):
        return {"diode_type": "signal", "reverse_voltage": 100, "forward_current_ma": 200}
    match = _ZENER.match(normalized)
    if match:
        profile: dict[str, str | float | int] = {"diode_type": "zener"}
        if match.group(1) in ZENER_VOLTAGES:
            profile["zener_voltage"] = ZENER_VOLTAGES[match.group(1)]
        return profile
    match = _FAST_RECOVERY.match(normalized)
    if match:
        return {
            "diode_type": "fast_recovery",
            "reverse_voltage": int(match.group(2)) * 10,
            "forward_current_ma": int(match.group(1)) * 1000,
        }
    match = _SCHOTTKY.match(normalized)
    if match:
        digits = match.group(1)
        split = 2 if len(digits) == 5 else len(digits) - 2
        current, voltage = digits[:split], digits[split:]
        amps = int(current) / 10 if current.startswith("0") else int(current)
        return {
            "diode_type": "schottky",
            "reverse_voltage": int(voltage),
            "forward_current_ma": int(amps * 1000),
        }
    return {}
