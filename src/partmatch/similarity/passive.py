"""Resistor and capacitor similarity.

Value must match (2% tolerance). The remaining score is weighted:
value 0.5, case size 0.3, tolerance 0.2, where an attribute unknown on either
side counts as agreeing. Different vendor series cap the score at HIGH and
different voltage ratings at MEDIUM.
"""

from ..classification import Classification
from ..component_types import ComponentType
from ..config import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY, NUMERIC_TOLERANCE
from ..values import values_match
from .base import SimilarityCalculator, both_known, disagree

VALUE_WEIGHT = 0.5
SIZE_WEIGHT = 0.3
TOLERANCE_WEIGHT = 0.2

_VALUE_KEYS = {
    ComponentType.RESISTOR: "resistance",
    ComponentType.CAPACITOR: "capacitance",
}


class PassiveSimilarityCalculator(SimilarityCalculator):
    name = "passive"
    categories = frozenset(_VALUE_KEYS)

    def compare(self, a: Classification, b: Classification) -> float | None:
        key = _VALUE_KEYS[a.category]
        if not both_known(a, b, key):
            return None
        if not values_match(a.get(key), b.get(key), NUMERIC_TOLERANCE):
            return LOW_SIMILARITY

        score = VALUE_WEIGHT
        if not disagree(a, b, "size"):
            score += SIZE_WEIGHT
        if not disagree(a, b, "tolerance"):
            score += TOLERANCE_WEIGHT
        score = round(score, 2)

        if a.series != b.series:
            score = min(score, HIGH_SIMILARITY)
        if both_known(a, b, "voltage") and not values_match(a.get("voltage"), b.get("voltage"), NUMERIC_TOLERANCE):
            score = min(score, MEDIUM_SIMILARITY)
        return score
