"""partmatch - electronic component MPN classification and similarity engine.

    >>> from partmatch import classify, similarity, can_replace
    >>> classify("AOD4184A").package_code
    'TO-252'
    >>> similarity("LM358N", "MC1458") >= 0.9
    True
    >>> can_replace("UHS1E101MPD", "UHW1E101MPD")
    True
"""

__version__ = "0.1.0"

from .classification import Classification
from .component_types import ComponentType
from .engine import Engine, can_replace, classify, get_engine, manufacturer_of, similarity
from .extraction import extract_mpns, find_mpn_in_text
from .values import InvalidAttributeError

__all__ = [
    "__version__",
    "Classification",
    "ComponentType",
    "Engine",
    "InvalidAttributeError",
    "can_replace",
    "classify",
    "extract_mpns",
    "find_mpn_in_text",
    "get_engine",
    "manufacturer_of",
    "similarity",
]
