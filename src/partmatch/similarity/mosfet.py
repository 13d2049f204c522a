"""MOSFET similarity."""

from ..classification import Classification
from ..component_types import ComponentType
from ..config import LOW_SIMILARITY, MEDIUM_SIMILARITY
from .base import SimilarityCalculator, agree, disagree


class MosfetSimilarityCalculator(SimilarityCalculator):
    name = "mosfet"
    categories = frozenset({ComponentType.MOSFET})

    def compare(self, a: Classification, b: Classification) -> float | None:
        # N and P channel parts are complements, not substitutes
        if disagree(a, b, "channel"):
            return LOW_SIMILARITY
        if a.series and a.series == b.series:
            return None
        if agree(a, b, "channel") and agree(a, b, "package"):
            return MEDIUM_SIMILARITY
        return None
