"""Sensor similarity: measured quantity first, then family and interface."""

from ..classification import Classification
from ..component_types import SENSOR_KINDS, ComponentType
from ..config import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY
from .base import SimilarityCalculator, agree


def sensor_kinds(classification: Classification) -> frozenset[str]:
    """Measured quantities, read from the type set (BME280 -> humidity, pressure, temperature)."""
    return frozenset(
        SENSOR_KINDS[t.base_type] for t in classification.types if t.base_type in SENSOR_KINDS
    )


def _interfaces(classification: Classification) -> set[str]:
    interface = classification.get("interface")
    return set(interface.split("/")) if interface else set()


class SensorSimilarityCalculator(SimilarityCalculator):
    name = "sensor"
    categories = frozenset({ComponentType.SENSOR})

    def compare(self, a: Classification, b: Classification) -> float | None:
        kinds_a, kinds_b = sensor_kinds(a), sensor_kinds(b)
        if not kinds_a or not kinds_b:
            return None
        # A temperature sensor never stands in for an accelerometer
        if kinds_a != kinds_b:
            return LOW_SIMILARITY
        if agree(a, b, "sensor_family"):
            return HIGH_SIMILARITY
        if _interfaces(a) & _interfaces(b):
            return MEDIUM_SIMILARITY
        return LOW_SIMILARITY
