"""Directional replacement advice: can part A stand in for part B?

A candidate replaces an original when:
1. both are recognized and share a category
2. their similarity reaches the category's minimum
3. every must_match attribute known on both sides is equal
4. every same_or_better attribute known on both sides is at least as good

Attributes known on only one side cannot be verified and are allowed through
(reported as unparseable), the same way missing datasheet specs are treated
when verifying alternatives.
"""

import logging
from typing import Any

from .classification import Classification
from .config import LOW_SIMILARITY, MEDIUM_SIMILARITY, NUMERIC_TOLERANCE
from .values import values_match

logger = logging.getLogger(__name__)


# =============================================================================
# COMPATIBILITY RULES
# =============================================================================
# Keyed by top-level category name.
# - must_match: attributes that must be equal
# - same_or_better: attributes where the candidate must be >= ("higher") or
#   <= ("lower") the original
# - min_similarity: similarity floor, MEDIUM unless stated

COMPATIBILITY_RULES: dict[str, dict[str, Any]] = {
    "CAPACITOR": {
        "must_match": ["capacitance", "voltage", "dielectric"],  # X7R != X5R
        "same_or_better": {
            "temperature_rating": "higher",  # 125C part can replace 105C
            "life": "higher",
            "tolerance": "lower",
        },
    },
    "RESISTOR": {
        "must_match": ["resistance", "size"],
        "same_or_better": {
            "tolerance": "lower",  # 1% can replace 5%
            "power": "higher",
        },
    },
    "CONNECTOR": {
        "must_match": ["pins", "pitch", "mounting", "gender"],
        "same_or_better": {
            "current_rating": "higher",
        },
    },
    "MEMORY": {
        "must_match": ["memory_type", "interface", "density_kbit", "supply_voltage"],
        "same_or_better": {
            "speed_ns": "lower",
            "max_clock_khz": "higher",
        },
    },
    "OPAMP": {
        "must_match": ["channels"],
    },
    "SENSOR": {
        "must_match": ["sensor_kind"],
    },
    "MOSFET": {
        "must_match": ["package", "channel"],
    },
    "TRANSISTOR": {
        "must_match": ["polarity", "package"],
        "same_or_better": {
            "vceo": "higher",
            "ic_ma": "higher",
        },
    },
    "DIODE": {
        "must_match": ["diode_type", "zener_voltage", "package"],  # DO-15 != DO-41
        "same_or_better": {
            "reverse_voltage": "higher",
            "forward_current_ma": "higher",
        },
    },
    "VOLTAGE_REGULATOR": {
        "must_match": ["regulator_type", "polarity", "output_voltage", "package"],
        "same_or_better": {
            "output_current_ma": "higher",
        },
    },
    "MICROCONTROLLER": {
        # Wi-Fi SoC generations differ by design; the rules carry the direction
        "min_similarity": LOW_SIMILARITY,
        "same_or_better": {
            "wifi_generation": "higher",
            "bluetooth_version": "higher",
            "flash_mb": "higher",
            "psram_mb": "higher",
        },
    },
}

# Ordered hierarchies for non-numeric same_or_better attributes, worst first
ORDERED_RANKS: dict[str, tuple[str, ...]] = {
    "life": ("standard", "long_life", "extra_long_life"),
}


def _rank(spec: str, value: Any) -> float | None:
    """Numeric position of a value for same_or_better comparison, None if unknown."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    ranks = ORDERED_RANKS.get(spec)
    if ranks and value in ranks:
        return float(ranks.index(value))
    return None


def _values_match(orig_val: Any, cand_val: Any) -> bool:
    """Check if two attribute values match (for must_match rules)."""
    if isinstance(orig_val, (int, float)) and isinstance(cand_val, (int, float)):
        return values_match(float(orig_val), float(cand_val), NUMERIC_TOLERANCE)
    return str(orig_val).strip().lower() == str(cand_val).strip().lower()


def _spec_ok(orig_val: Any, cand_val: Any, spec: str, direction: str) -> bool | None:
    """Check if candidate meets a same_or_better requirement. None if unrankable."""
    orig_rank = _rank(spec, orig_val)
    cand_rank = _rank(spec, cand_val)
    if orig_rank is None or cand_rank is None:
        return None
    if direction == "higher":
        return cand_rank >= orig_rank * (1 - NUMERIC_TOLERANCE)
    if direction == "lower":
        return cand_rank <= orig_rank * (1 + NUMERIC_TOLERANCE)
    return True


def min_similarity(category_name: str) -> float:
    return COMPATIBILITY_RULES.get(category_name, {}).get("min_similarity", MEDIUM_SIMILARITY)


def check_rules(original: Classification, candidate: Classification) -> tuple[bool, dict[str, Any]]:
    """Apply the category's must_match / same_or_better rules.

    Returns (is_compatible, verification_info) where verification_info holds
    specs_verified, specs_unparseable and, on failure, the failing spec.
    """
    rules = COMPATIBILITY_RULES.get(original.category.value if original.category else "", {})
    specs_verified: list[str] = []
    specs_unparseable: list[str] = []

    def result(ok: bool, failed: str | None = None) -> tuple[bool, dict[str, Any]]:
        info: dict[str, Any] = {"specs_verified": specs_verified, "specs_unparseable": specs_unparseable}
        if failed:
            info["failed_spec"] = failed
        return ok, info

    for spec in rules.get("must_match", []):
        orig_val = original.get(spec)
        cand_val = candidate.get(spec)
        if orig_val is not None and cand_val is not None:
            if not _values_match(orig_val, cand_val):
                return result(False, spec)
            specs_verified.append(spec)
        elif orig_val is not None or cand_val is not None:
            specs_unparseable.append(spec)  # One side missing

    for spec, direction in rules.get("same_or_better", {}).items():
        orig_val = original.get(spec)
        cand_val = candidate.get(spec)
        if orig_val is not None and cand_val is not None:
            ok = _spec_ok(orig_val, cand_val, spec, direction)
            if ok is None:
                specs_unparseable.append(spec)  # No ordering known
            elif not ok:
                return result(False, spec)
            else:
                specs_verified.append(spec)
        elif orig_val is not None or cand_val is not None:
            specs_unparseable.append(spec)

    return result(True)


def explain_replacement(
    candidate: Classification, original: Classification, similarity: float
) -> tuple[bool, dict[str, Any]]:
    """Decide whether `candidate` can replace `original`, with the reasoning.

    `similarity` is the (symmetric) score of the pair; direction comes only
    from the same_or_better rules.
    """
    info: dict[str, Any] = {"similarity": similarity, "specs_verified": [], "specs_unparseable": []}
    if not candidate.recognized or not original.recognized:
        info["reason"] = "unrecognized part number"
        return False, info
    if candidate.category is not original.category:
        info["reason"] = (
            f"category mismatch: {candidate.category.value} vs {original.category.value}"
        )
        return False, info

    category = original.category.value
    floor = min_similarity(category)
    if similarity < floor:
        info["reason"] = f"similarity {similarity} below {floor} required for {category}"
        return False, info

    ok, verification = check_rules(original, candidate)
    info.update(verification)
    if not ok:
        spec = verification["failed_spec"]
        info["reason"] = (
            f"{spec}: {candidate.get(spec)!r} does not satisfy {original.get(spec)!r}"
        )
        logger.debug(f"{candidate.mpn} cannot replace {original.mpn}: {info['reason']}")
        return False, info

    info["reason"] = "compatible"
    return True, info
