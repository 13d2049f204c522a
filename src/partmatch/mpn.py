"""MPN string helpers shared by handlers, calculators and the engine."""

import re

_NON_ALNUM = re.compile(r"[^A-Z0-9]")


def clean_mpn(mpn: str | None) -> str:
    """Trim and uppercase an MPN: ' aod4184a ' -> 'AOD4184A'. None -> ''."""
    if not mpn or not isinstance(mpn, str):
        return ""
    return mpn.strip().upper()


def normalize_mpn(mpn: str | None) -> str:
    """Identity key for an MPN with punctuation removed: 'AOD-4184a' -> 'AOD4184A'."""
    return _NON_ALNUM.sub("", clean_mpn(mpn))


def starts_with_any(mpn: str, prefixes) -> bool:
    """Check if an (already cleaned) MPN starts with any of the prefixes."""
    return any(mpn.startswith(prefix) for prefix in prefixes)


def longest_prefix(mpn: str, prefixes) -> str | None:
    """Return the longest prefix in `prefixes` that `mpn` starts with."""
    best = None
    for prefix in prefixes:
        if mpn.startswith(prefix) and (best is None or len(prefix) > len(best)):
            best = prefix
    return best
