"""Per-category similarity calculators.

`calculator_for(category)` returns the first calculator that applies, with the
default calculator last so every category is covered.
"""

from ..component_types import ComponentType
from .base import SimilarityCalculator
from .connector import ConnectorSimilarityCalculator
from .default import DefaultSimilarityCalculator
from .diode import DiodeSimilarityCalculator
from .memory import MemorySimilarityCalculator
from .mosfet import MosfetSimilarityCalculator
from .opamp import OpAmpSimilarityCalculator
from .passive import PassiveSimilarityCalculator
from .regulator import VoltageRegulatorSimilarityCalculator
from .sensor import SensorSimilarityCalculator, sensor_kinds
from .transistor import TransistorSimilarityCalculator

CALCULATORS: tuple[SimilarityCalculator, ...] = (
    OpAmpSimilarityCalculator(),
    SensorSimilarityCalculator(),
    MemorySimilarityCalculator(),
    ConnectorSimilarityCalculator(),
    PassiveSimilarityCalculator(),
    TransistorSimilarityCalculator(),
    MosfetSimilarityCalculator(),
    DiodeSimilarityCalculator(),
    VoltageRegulatorSimilarityCalculator(),
    DefaultSimilarityCalculator(),
)


def calculator_for(category: ComponentType | None) -> SimilarityCalculator:
    for calculator in CALCULATORS:
        if calculator.applies_to(category):
            return calculator
    return CALCULATORS[-1]


__all__ = [
    "CALCULATORS",
    "calculator_for",
    "sensor_kinds",
    "SimilarityCalculator",
    "OpAmpSimilarityCalculator",
    "SensorSimilarityCalculator",
    "MemorySimilarityCalculator",
    "ConnectorSimilarityCalculator",
    "PassiveSimilarityCalculator",
    "TransistorSimilarityCalculator",
    "MosfetSimilarityCalculator",
    "DiodeSimilarityCalculator",
    "VoltageRegulatorSimilarityCalculator",
    "DefaultSimilarityCalculator",
]
