"""Espressif Wi-Fi SoCs and modules (ESP8266, ESP8285, ESP32 family)."""

import re
from typing import Any

from ..component_types import ComponentType
from ..mpn import clean_mpn
from .base import ManufacturerHandler

_CHIP = re.compile(r"^(ESP8266|ESP8285|ESP32(?:-[SC][0-9])?)")
_LEGACY_MODULE = re.compile(r"^ESP-WROOM-0[0-9]")
_MODULE = re.compile(r"-(WROOM|WROVER|MINI|SOLO)(?:-([0-9]+[A-Z]?))?")
# Module ordering suffix -N8R2 or SoC suffix FN8 / FH4R2: flash and PSRAM in MB
_MODULE_MEMORY = re.compile(r"-N([0-9]+)(?:R([0-9]+))?")
_SOC_MEMORY = re.compile(r"F[NH]([0-9]+)(?:R([0-9]+))?$")

# chip: (Wi-Fi generation, Bluetooth version or 0.0, SoC package)
CHIP_INFO: dict[str, tuple[int, float, str]] = {
    "ESP8266": (4, 0.0, "QFN-32"),
    "ESP8285": (4, 0.0, "QFN-32"),
    "ESP32": (4, 4.2, "QFN-48"),
    "ESP32-S2": (4, 0.0, "QFN-56"),
    "ESP32-S3": (4, 5.0, "QFN-56"),
    "ESP32-C2": (4, 5.0, "QFN-24"),
    "ESP32-C3": (4, 5.0, "QFN-32"),
    "ESP32-C5": (6, 5.0, "QFN-48"),
    "ESP32-C6": (6, 5.3, "QFN-40"),
}


class EspressifHandler(ManufacturerHandler):
    name = "espressif"
    manufacturer = "Espressif Systems"

    PATTERNS = {
        ComponentType.WIFI_SOC_ESPRESSIF: (
            r"^ESP8266[A-Z0-9-]*$",
            r"^ESP8285[A-Z0-9-]*$",
            r"^ESP32(?!-H)[A-Z0-9-]*$",  # ESP32-H parts have no Wi-Fi radio
            r"^ESP-WROOM-0[0-9][A-Z0-9-]*$",
        ),
    }

    def extract_series(self, mpn: str | None) -> str | None:
        """Chip family: 'ESP32-S3-WROOM-1-N8R8' -> 'ESP32-S3', 'ESP-WROOM-02' -> 'ESP8266'"""
        mpn = clean_mpn(mpn)
        if _LEGACY_MODULE.match(mpn):
            return "ESP8266"
        match = _CHIP.match(mpn)
        if not match:
            return None
        series = match.group(1)
        return series if series in CHIP_INFO else "ESP32"

    def extract_package_code(self, mpn: str | None) -> str | None:
        """Module name for modules, the bare die package otherwise."""
        mpn = clean_mpn(mpn)
        module = _MODULE.search(mpn)
        if module:
            return "-".join(part for part in module.groups() if part)
        if _LEGACY_MODULE.match(mpn):
            return "WROOM"
        series = self.extract_series(mpn)
        return CHIP_INFO[series][2] if series else None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        mpn = clean_mpn(mpn)
        series = self.extract_series(mpn)
        if not series:
            return {}
        generation, bluetooth, _ = CHIP_INFO[series]
        is_module = bool(_MODULE.search(mpn) or _LEGACY_MODULE.match(mpn))
        attrs: dict[str, Any] = {
            "chip": series,
            "wifi_generation": generation,
            "bluetooth_version": bluetooth,
            "form": "module" if is_module else "soc",
        }
        memory = (_MODULE_MEMORY.search(mpn) if is_module else None) or _SOC_MEMORY.search(mpn)
        if memory:
            attrs["flash_mb"] = int(memory.group(1))
            attrs["psram_mb"] = int(memory.group(2) or 0)
        return attrs
