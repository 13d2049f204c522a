"""Classification and similarity engine.

The engine wires the handlers into one pattern registry at construction,
freezes it, and from then on is read-only: every public method is a pure
function of its arguments. The process-wide instance is built lazily by
`get_engine()`.

Dispatch: handlers are tried in registration order and the first one whose
rules accept the MPN owns it. Its matched types (plus their ancestors) form
the type set, and its extractors fill package, series and attributes.
"""

import logging
import threading
from typing import Any

from .classification import Classification
from .component_types import MEMORY_KINDS, ComponentType
from .config import NO_SIMILARITY
from .handlers import ManufacturerHandler, default_handlers
from .mpn import clean_mpn
from .registry import PatternRegistry
from .replacement import explain_replacement
from .similarity import calculator_for, sensor_kinds

logger = logging.getLogger(__name__)


class Engine:
    """Immutable MPN classifier and comparator."""

    def __init__(
        self,
        handlers: list[ManufacturerHandler] | None = None,
        registry: PatternRegistry | None = None,
    ):
        self._handlers = tuple(handlers if handlers is not None else default_handlers())
        self._by_name = {handler.name: handler for handler in self._handlers}
        self.registry = registry if registry is not None else PatternRegistry()
        for handler in self._handlers:
            handler.initialize_patterns(self.registry)
        self.registry.freeze()
        logger.info(f"Engine ready: {len(self._handlers)} handlers, {len(self.registry)} patterns")

    # =========================================================================
    # CLASSIFICATION
    # =========================================================================

    def handlers(self) -> tuple[ManufacturerHandler, ...]:
        return self._handlers

    def handler(self, name: str) -> ManufacturerHandler | None:
        return self._by_name.get(name)

    def classify(self, mpn: str | None) -> Classification:
        """Classify an MPN. Unrecognized or blank input gives an empty type set."""
        cleaned = clean_mpn(mpn)
        if not cleaned:
            return Classification(mpn="")

        for handler in self._handlers:
            matched = handler.matching_types(cleaned, self.registry)
            if not matched:
                continue
            types: set[ComponentType] = set()
            for component_type in matched:
                types.update(component_type.lineage)
            classification = Classification(
                mpn=cleaned,
                types=frozenset(types),
                primary_type=matched[0],
                handler=handler.name,
                manufacturer=handler.manufacturer,
                package_code=handler.extract_package_code(cleaned),
                series=handler.extract_series(cleaned),
                attributes=handler.attributes(cleaned),
                other_manufacturers=self._other_manufacturers(cleaned, handler.name),
            )
            self._add_type_attributes(classification)
            logger.debug(f"Classified {cleaned} as {matched[0].value} via {handler.name}")
            return classification

        logger.debug(f"No handler recognized {cleaned}")
        return Classification(mpn=cleaned)

    def _other_manufacturers(self, mpn: str, winner: str) -> list[str]:
        others = []
        for owner in self.registry.owners(mpn):
            handler = self._by_name.get(owner)
            if owner != winner and handler is not None:
                others.append(handler.manufacturer)
        return others

    def _add_type_attributes(self, classification: Classification) -> None:
        """Attributes implied by the type set rather than by the MPN text."""
        attrs = classification.attributes
        kinds = sensor_kinds(classification)
        if kinds:
            attrs.setdefault("sensor_kinds", sorted(kinds))
            attrs.setdefault("sensor_kind", next(iter(kinds)) if len(kinds) == 1 else "combined")
        for component_type, kind in MEMORY_KINDS.items():
            if component_type in classification.types:
                attrs.setdefault("memory_type", kind)

    def manufacturer_of(self, mpn: str | None) -> str | None:
        return self.classify(mpn).manufacturer

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def similarity_of(self, a: Classification, b: Classification) -> float:
        if not a.recognized or not b.recognized or a.category is not b.category:
            return NO_SIMILARITY
        return calculator_for(a.category).calculate(a, b)

    def similarity(self, mpn_a: str | None, mpn_b: str | None) -> float:
        """Symmetric interchangeability score on [0.0, 1.0]."""
        return self.similarity_of(self.classify(mpn_a), self.classify(mpn_b))

    def explain_replacement(self, candidate: str | None, original: str | None) -> tuple[bool, dict[str, Any]]:
        """Verdict and reasoning for `candidate` standing in for `original`."""
        a, b = self.classify(candidate), self.classify(original)
        return explain_replacement(a, b, self.similarity_of(a, b))

    def can_replace(self, candidate: str | None, original: str | None) -> bool:
        """True if `candidate` can replace `original` (directional)."""
        return self.explain_replacement(candidate, original)[0]


# Global engine instance
_engine: Engine | None = None
_engine_lock = threading.Lock()


def get_engine() -> Engine:
    """Get or create the global engine instance (thread-safe)."""
    global _engine
    if _engine is None:
        with _engine_lock:
            # Double-check locking pattern
            if _engine is None:
                _engine = Engine()
    return _engine


def classify(mpn: str | None) -> Classification:
    return get_engine().classify(mpn)


def similarity(mpn_a: str | None, mpn_b: str | None) -> float:
    return get_engine().similarity(mpn_a, mpn_b)


def can_replace(candidate: str | None, original: str | None) -> bool:
    return get_engine().can_replace(candidate, original)


def manufacturer_of(mpn: str | None) -> str | None:
    return get_engine().manufacturer_of(mpn)
