"""Find MPNs in free text (BOM lines, order notes, "P/N: ..." annotations)."""

import re

from .engine import Engine, get_engine
from .mpn import clean_mpn

# Token separators: whitespace and common BOM delimiters
_TOKEN_SPLIT = re.compile(r"[\s;,|]+")
_SURROUNDING_PUNCTUATION = "()[]{}<>\"'`.:"

# Decorations stripped from a token before classification.
# Order matters! Longer prefixes first so 'MPN:' wins over 'PN:'.
MPN_PREFIXES = (
    "P/N:", "MPN:", "MPN-", "PART-", "ITEM:", "ITEM-", "REF:", "REF-", "PN:", "IC-",
)
MPN_SUFFIXES = ("-ROHS", "-SMD", "-THT")


def clean_token(token: str) -> str:
    """Strip BOM decorations from one token: 'MPN:lm358n' -> 'LM358N', 'value=TL072' -> 'TL072'"""
    token = clean_mpn(token)
    if "=" in token:
        token = token.split("=", 1)[1]
    token = token.strip(_SURROUNDING_PUNCTUATION)
    for prefix in MPN_PREFIXES:
        if token.startswith(prefix) and len(token) > len(prefix):
            token = token[len(prefix):]
            break
    for suffix in MPN_SUFFIXES:
        if token.endswith(suffix) and len(token) > len(suffix):
            token = token[: -len(suffix)]
            break
    return token.strip(_SURROUNDING_PUNCTUATION)


def _candidates(text: str):
    for token in _TOKEN_SPLIT.split(text):
        cleaned = clean_token(token)
        if cleaned:
            yield cleaned


def find_mpn_in_text(text: str | None, engine: Engine | None = None) -> str | None:
    """Return the first token any handler recognizes, or None."""
    if not text or not isinstance(text, str):
        return None
    engine = engine or get_engine()
    for candidate in _candidates(text):
        if engine.classify(candidate).recognized:
            return candidate
    return None


def extract_mpns(text: str | None, engine: Engine | None = None, limit: int | None = None) -> list[str]:
    """Every recognized MPN in the text, in order of appearance, without duplicates."""
    if not text or not isinstance(text, str):
        return []
    engine = engine or get_engine()
    found: list[str] = []
    for candidate in _candidates(text):
        if candidate in found or not engine.classify(candidate).recognized:
            continue
        found.append(candidate)
        if limit is not None and len(found) >= limit:
            break
    return found
