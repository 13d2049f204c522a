"""Bipolar transistor similarity."""

from ..classification import Classification
from ..component_types import ComponentType
from ..config import LOW_SIMILARITY, MEDIUM_SIMILARITY
from .base import SimilarityCalculator, agree, disagree


class TransistorSimilarityCalculator(SimilarityCalculator):
    name = "transistor"
    categories = frozenset({ComponentType.TRANSISTOR})

    def compare(self, a: Classification, b: Classification) -> float | None:
        # NPN and PNP are never interchangeable
        if disagree(a, b, "polarity"):
            return LOW_SIMILARITY
        if agree(a, b, "polarity") and agree(a, b, "package"):
            return MEDIUM_SIMILARITY
        return None
