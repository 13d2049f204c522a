"""Configuration for the partmatch engine and MCP server."""

import os

# Server settings
HTTP_PORT = int(os.getenv("HTTP_PORT", "8080"))
RATE_LIMIT_REQUESTS = int(os.getenv("RATE_LIMIT_REQUESTS", "100"))
RATE_LIMIT_WINDOW = int(os.getenv("RATE_LIMIT_WINDOW", "60"))  # seconds
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Input limits for the tool surface
MAX_MPN_LENGTH = int(os.getenv("MAX_MPN_LENGTH", "100"))
MAX_TEXT_LENGTH = int(os.getenv("MAX_TEXT_LENGTH", "5000"))
MAX_TEXT_RESULTS = int(os.getenv("MAX_TEXT_RESULTS", "50"))

# Similarity bands
HIGH_SIMILARITY = 0.9  # Drop-in equivalent
MEDIUM_SIMILARITY = 0.7  # Same family, compatible with caveats
LOW_SIMILARITY = 0.3  # Same broad category, different part
NO_SIMILARITY = 0.0  # Different category or unrecognized

# Relative tolerance when comparing numeric attributes (display rounding)
NUMERIC_TOLERANCE = 0.02
