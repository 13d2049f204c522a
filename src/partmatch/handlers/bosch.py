"""Bosch Sensortec MEMS and environmental sensors.

One MPN can carry several sensor types (BME280 measures humidity, pressure
and temperature), so the pattern table lists a family under every type it
belongs to. The first matching entry is the primary type.
"""

import re
from typing import Any

from ..component_types import ComponentType
from ..families import sensor_profile
from ..mpn import clean_mpn
from .base import ManufacturerHandler

_SERIES = re.compile(r"^(BM[EPAIG][0-9]{3})")


class BoschHandler(ManufacturerHandler):
    name = "bosch"
    manufacturer = "Bosch Sensortec"

    PATTERNS = {
        ComponentType.HUMIDITY_SENSOR_BOSCH: (
            r"^BME[0-9]{3}.*",
        ),
        ComponentType.PRESSURE_SENSOR_BOSCH: (
            r"^BME[0-9]{3}.*",
            r"^BMP[0-9]{3}.*",
        ),
        ComponentType.TEMPERATURE_SENSOR_BOSCH: (
            r"^BME[0-9]{3}.*",
            r"^BMP[0-9]{3}.*",
        ),
        ComponentType.ACCELEROMETER_BOSCH: (
            r"^BMA[0-9]{3}.*",
            r"^BMI[0-9]{3}.*",  # IMU: accelerometer + gyroscope
        ),
        ComponentType.GYROSCOPE_BOSCH: (
            r"^BMG[0-9]{3}.*",
            r"^BMI[0-9]{3}.*",
        ),
    }

    def extract_series(self, mpn: str | None) -> str | None:
        """'BME280' -> 'BME280', 'BMI160-SHUTTLE' -> 'BMI160'"""
        match = _SERIES.match(clean_mpn(mpn))
        return match.group(1) if match else None

    def extract_package_code(self, mpn: str | None) -> str | None:
        # Every current Bosch Sensortec part ships in an LGA package
        return "LGA" if self.extract_series(mpn) else None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        series = self.extract_series(mpn)
        return sensor_profile(series) if series else {}
