"""Linear voltage regulator similarity.

Fixed and adjustable regulators never substitute for each other, and neither do
positive and negative ones. Fixed parts of the same output voltage are second
sources of each other across vendors (LM7805 / MC7805 / UA7805).
"""

from ..classification import Classification
from ..component_types import ComponentType
from ..config import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY
from .base import SimilarityCalculator, agree, disagree


class VoltageRegulatorSimilarityCalculator(SimilarityCalculator):
    name = "regulator"
    categories = frozenset({ComponentType.VOLTAGE_REGULATOR})

    def compare(self, a: Classification, b: Classification) -> float | None:
        if disagree(a, b, "regulator_type") or disagree(a, b, "polarity"):
            return LOW_SIMILARITY
        if disagree(a, b, "output_voltage"):
            return LOW_SIMILARITY
        if a.get("regulator_type") == "fixed" and agree(a, b, "regulator_type") and agree(a, b, "output_voltage"):
            # 78L05 (100mA) is the same circuit as a 7805 (1A) but not a drop-in
            if disagree(a, b, "output_current_ma"):
                return MEDIUM_SIMILARITY
            return HIGH_SIMILARITY
        return None
