"""Connector similarity: pin count, gender, series, then pitch and mounting."""

from ..classification import Classification
from ..component_types import ComponentType
from ..config import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY
from .base import SimilarityCalculator, agree, disagree


class ConnectorSimilarityCalculator(SimilarityCalculator):
    name = "connector"
    categories = frozenset({ComponentType.CONNECTOR})

    def compare(self, a: Classification, b: Classification) -> float | None:
        if disagree(a, b, "pins") or disagree(a, b, "gender"):
            return LOW_SIMILARITY
        if agree(a, b, "series") and agree(a, b, "pins"):
            return HIGH_SIMILARITY
        if all(agree(a, b, key) for key in ("pitch", "pins", "mounting")):
            return MEDIUM_SIMILARITY
        return LOW_SIMILARITY
