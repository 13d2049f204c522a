"""Base class for manufacturer handlers.

A handler owns every classification and extraction rule for one manufacturer:
- PATTERNS: ordered {ComponentType: (regex, ...)} table registered into the registry
- PACKAGE_CODES: suffix literal -> package name lookup used by the default extractor
- matches / extract_package_code / extract_series / attributes

Handlers are stateless after construction and every method is a pure function
of the MPN string. Nothing here raises on malformed MPNs: unknown attributes are
returned as None.
"""

import re
from typing import Any

from ..component_types import ComponentType
from ..mpn import clean_mpn
from ..registry import PatternRegistry

_TRAILING_LETTERS = re.compile(r"[0-9]([A-Z]+)$")
_DEFAULT_SERIES = re.compile(r"^([A-Z]+[0-9]+)")


class ManufacturerHandler:
    """Per-vendor classification and attribute extraction."""

    name: str = ""  # Registry owner key, e.g. "alpha_omega"
    manufacturer: str = ""  # Display name, e.g. "Alpha & Omega Semiconductor"

    # Most specific type first: the first matching entry becomes the primary type
    PATTERNS: dict[ComponentType, tuple[str, ...]] = {}
    PACKAGE_CODES: dict[str, str] = {}

    def initialize_patterns(self, registry: PatternRegistry) -> None:
        """Register this handler's pattern table, tagged with the handler name."""
        for component_type, patterns in self.PATTERNS.items():
            for pattern in patterns:
                registry.register(component_type, pattern, owner=self.name)

    def ordered_types(self) -> tuple[ComponentType, ...]:
        return tuple(self.PATTERNS)

    def supported_types(self) -> frozenset[ComponentType]:
        """Every type this handler can claim, including base types and parents."""
        supported: set[ComponentType] = set()
        for component_type in self.PATTERNS:
            supported.update(component_type.lineage)
        return frozenset(supported)

    def matches(self, mpn: str | None, component_type: ComponentType, registry: PatternRegistry) -> bool:
        mpn = clean_mpn(mpn)
        if not mpn or component_type is None:
            return False
        return registry.matches_for_owner(mpn, component_type, self.name)

    def matching_types(self, mpn: str | None, registry: PatternRegistry) -> list[ComponentType]:
        """Own types accepting the MPN, in PATTERNS order."""
        return [t for t in self.ordered_types() if self.matches(mpn, t, registry)]

    def extract_package_code(self, mpn: str | None) -> str | None:
        """Default: suffix after the last hyphen, else trailing letters, via PACKAGE_CODES."""
        mpn = clean_mpn(mpn)
        if not mpn:
            return None
        if "-" in mpn:
            suffix = mpn.rsplit("-", 1)[1]
            if suffix in self.PACKAGE_CODES:
                return self.PACKAGE_CODES[suffix]
        match = _TRAILING_LETTERS.search(mpn)
        if match:
            return self.suffix_package(match.group(1))
        return None

    def suffix_package(self, suffix: str) -> str | None:
        """Longest PACKAGE_CODES key that ends the suffix."""
        for length in range(len(suffix), 0, -1):
            code = suffix[-length:]
            if code in self.PACKAGE_CODES:
                return self.PACKAGE_CODES[code]
        return None

    def extract_series(self, mpn: str | None) -> str | None:
        """Default: leading letters plus the first digit run ('MUR460RL' -> 'MUR460')."""
        mpn = clean_mpn(mpn)
        if not mpn:
            return None
        match = _DEFAULT_SERIES.match(mpn)
        return match.group(1) if match else None

    def attributes(self, mpn: str | None) -> dict[str, Any]:
        """Category-specific derived attributes. Keys absent when unknown."""
        return {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
