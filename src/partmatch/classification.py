"""Classification result shared by the engine, calculators and the tool surface."""

from dataclasses import dataclass, field
from typing import Any

from .component_types import ComponentType


@dataclass
class Classification:
    """Everything the engine could derive from one MPN.

    An unrecognized MPN yields an empty `types` set and None for every other
    derived field; it is never an error.
    """
    mpn: str
    types: frozenset[ComponentType] = frozenset()
    primary_type: ComponentType | None = None
    handler: str | None = None  # Registry owner key of the winning handler
    manufacturer: str | None = None
    package_code: str | None = None
    series: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)
    other_manufacturers: list[str] = field(default_factory=list)

    @property
    def recognized(self) -> bool:
        return bool(self.types)

    @property
    def category(self) -> ComponentType | None:
        return self.primary_type.category if self.primary_type else None

    def get(self, key: str, default: Any = None) -> Any:
        """Attribute lookup that also covers package_code and series."""
        if key in ("package", "package_code"):
            return self.package_code if self.package_code is not None else default
        if key == "series":
            return self.series if self.series is not None else default
        return self.attributes.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mpn": self.mpn,
            "recognized": self.recognized,
            "primary_type": self.primary_type.value if self.primary_type else None,
            "category": self.category.value if self.category else None,
            "types": sorted(t.value for t in self.types),
            "manufacturer": self.manufacturer,
            "package": self.package_code,
            "series": self.series,
            "attributes": dict(self.attributes),
            "other_manufacturers": list(self.other_manufacturers),
        }
