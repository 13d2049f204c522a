"""Base similarity calculator.

Every calculator scores in the same fixed order:
1. category gate (unrecognized side, wrong category, or different categories -> 0.0)
2. identity (same normalized MPN -> 1.0)
3. curated equivalence family (-> HIGH)
4. category-specific structural comparison (`compare`, may defer with None)
5. vendor series (same -> HIGH, else LOW)

Subclasses only override `categories` and `compare`; the ordering is fixed so
that no structural rule can ever score two parts of different categories.
"""

import logging

from ..classification import Classification
from ..component_types import ComponentType
from ..config import HIGH_SIMILARITY, LOW_SIMILARITY, NO_SIMILARITY
from ..families import ALL_FAMILIES, EquivalenceFamily, same_family
from ..mpn import normalize_mpn

logger = logging.getLogger(__name__)

IDENTICAL = 1.0


class SimilarityCalculator:
    """Scores two classified parts of one category on [0.0, 1.0]."""

    name = "base"
    # Top-level categories this calculator scores; empty means every category
    categories: frozenset[ComponentType] = frozenset()

    def applies_to(self, category: ComponentType | None) -> bool:
        if category is None:
            return False
        return not self.categories or category in self.categories

    def families_for(self, category: ComponentType) -> tuple[EquivalenceFamily, ...]:
        return tuple(f for f in ALL_FAMILIES if f.category is category)

    def calculate(self, a: Classification, b: Classification) -> float:
        if not a.recognized or not b.recognized:
            return NO_SIMILARITY
        category = a.category
        if category is not b.category or not self.applies_to(category):
            return NO_SIMILARITY
        if normalize_mpn(a.mpn) == normalize_mpn(b.mpn):
            return IDENTICAL
        if same_family(a.mpn, b.mpn, self.families_for(category)):
            return HIGH_SIMILARITY
        score = self.compare(a, b)
        if score is not None:
            logger.debug(f"{self.name}: {a.mpn} vs {b.mpn} structural score {score}")
            return score
        return self.series_score(a, b)

    def compare(self, a: Classification, b: Classification) -> float | None:
        """Category-specific rules. None defers to the series comparison."""
        return None

    def series_score(self, a: Classification, b: Classification) -> float:
        if a.series and a.series == b.series:
            return HIGH_SIMILARITY
        return LOW_SIMILARITY


def both_known(a: Classification, b: Classification, key: str) -> bool:
    return a.get(key) is not None and b.get(key) is not None


def agree(a: Classification, b: Classification, key: str) -> bool:
    """True when both sides know `key` and it is equal."""
    return both_known(a, b, key) and a.get(key) == b.get(key)


def disagree(a: Classification, b: Classification, key: str) -> bool:
    """True when both sides know `key` and it differs. Unknown never disagrees."""
    return both_known(a, b, key) and a.get(key) != b.get(key)
