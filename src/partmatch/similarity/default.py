"""Fallback calculator for categories without structural rules."""

from .base import SimilarityCalculator


class DefaultSimilarityCalculator(SimilarityCalculator):
    """Category gate, identity, families and series only (Wi-Fi SoCs and anything unlisted)."""

    name = "default"
