"""Diode similarity.

Diodes of different kinds (signal, rectifier, schottky, fast recovery, zener)
score LOW. Zeners only match at the same zener voltage. Other kinds match on
reverse voltage, with a forward current difference capping at MEDIUM.
"""

from ..classification import Classification
from ..component_types import ComponentType
from ..config import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY, NUMERIC_TOLERANCE
from ..values import values_match
from .base import SimilarityCalculator, both_known, disagree


class DiodeSimilarityCalculator(SimilarityCalculator):
    name = "diode"
    categories = frozenset({ComponentType.DIODE})

    def compare(self, a: Classification, b: Classification) -> float | None:
        if disagree(a, b, "diode_type"):
            return LOW_SIMILARITY
        if both_known(a, b, "zener_voltage"):
            if values_match(a.get("zener_voltage"), b.get("zener_voltage"), NUMERIC_TOLERANCE):
                return HIGH_SIMILARITY
            return LOW_SIMILARITY
        if not both_known(a, b, "reverse_voltage"):
            return None
        if not values_match(a.get("reverse_voltage"), b.get("reverse_voltage"), NUMERIC_TOLERANCE):
            return MEDIUM_SIMILARITY
        if disagree(a, b, "forward_current_ma"):
            return MEDIUM_SIMILARITY
        return HIGH_SIMILARITY
