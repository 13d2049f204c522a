"""Memory similarity: technology, bus, then series and density."""

from ..classification import Classification
from ..component_types import ComponentType
from ..config import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY
from .base import SimilarityCalculator, agree, disagree

# Differences that keep a part pin- and protocol-compatible but not identical
_SPEED_KEYS = ("speed_ns", "max_clock_khz", "supply_voltage")


class MemorySimilarityCalculator(SimilarityCalculator):
    name = "memory"
    categories = frozenset({ComponentType.MEMORY})

    def compare(self, a: Classification, b: Classification) -> float | None:
        if disagree(a, b, "memory_type") or disagree(a, b, "interface"):
            return LOW_SIMILARITY
        if agree(a, b, "series") and not disagree(a, b, "density_kbit"):
            if any(disagree(a, b, key) for key in _SPEED_KEYS):
                return MEDIUM_SIMILARITY
            return HIGH_SIMILARITY
        return LOW_SIMILARITY
