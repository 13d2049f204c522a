"""Beken Wi-Fi + BLE combo SoCs (BK72xx)."""

import re
from typing import Any

from ..component_types import ComponentType
from ..mpn import clean_mpn
from .base import ManufacturerHandler

_SERIES = re.compile(r"^(BK72[0-9]{2})")
_QFN = re.compile(r"QFN-?([0-9]+)")

# Wi-Fi 6 parts; the rest of the BK72xx line is 802.11n
_WIFI6_SERIES = frozenset({"BK7236", "BK7239", "BK7256", "BK7258"})


class BekenHandler(ManufacturerHandler):
    name = "beken"
    manufacturer = "Beken Corporation"

    PATTERNS = {
        ComponentType.WIFI_SOC_BEKEN: (
            r"^BK72[0-9]{2}[A-Z0-9-]*$",
        ),
    }

    def extract_series(self, mpn: str | None) -> str | None:
        """'BK7231N-QFN32' -> 'BK7231'"""
        match = _SERIES.match(clean_mpn(mpn))
        return match.group(1) if match else None

    def extract_package_code(self, mpn: str | None) -> str | None:
        match = _QFN.search(clean_mpn(mpn))
        return f"QFN-{match.group(1)}" if match else None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        series = self.extract_series(mpn)
        if not series:
            return {}
        wifi6 = series in _WIFI6_SERIES
        return {
            "chip": series,
            "wifi_generation": 6 if wifi6 else 4,
            "bluetooth_version": 5.2 if wifi6 else 4.2,
            "form": "soc",
        }
