"""Op-amp similarity: channel count and input stage technology."""

from ..classification import Classification
from ..component_types import ComponentType
from ..config import LOW_SIMILARITY, MEDIUM_SIMILARITY
from .base import SimilarityCalculator, both_known


class OpAmpSimilarityCalculator(SimilarityCalculator):
    """Only a curated family match (LM358 ~ MC1458) reaches HIGH.

    Outside a family, sharing either the channel count or the input technology
    is worth MEDIUM (TL072 vs TL074), sharing neither is LOW.
    """

    name = "opamp"
    categories = frozenset({ComponentType.OPAMP})

    def compare(self, a: Classification, b: Classification) -> float | None:
        if not both_known(a, b, "channels") or not both_known(a, b, "input_type"):
            return None
        same_channels = a.get("channels") == b.get("channels")
        same_technology = a.get("input_type") == b.get("input_type")
        if same_channels or same_technology:
            return MEDIUM_SIMILARITY
        return LOW_SIMILARITY
