"""Image acquisition constants.

All image acquisition limits in one place for consistency.
"""

from __future__ import annotations

# Size limits
IMPORT_IMAGE_MAX_BYTES = 5_000_000  # 5 MB
IMPORT_IMAGE_MIN_BYTES = 1000  # smaller bodies are broken or placeholder images
IMPORT_IMAGE_MAX_COUNT = 5

# Timeouts
IMPORT_IMAGE_TIMEOUT = 10  # seconds

IMPORT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# HTTP headers for image requests
IMPORT_IMAGE_HEADERS = {
    "User-Agent": IMPORT_USER_AGENT,
    "Accept": "image/*",
}

# Used when the response carries no usable content type
IMPORT_IMAGE_DEFAULT_TYPE = "image/jpeg"

__all__ = [
    "IMPORT_IMAGE_DEFAULT_TYPE",
    "IMPORT_IMAGE_HEADERS",
    "IMPORT_IMAGE_MAX_BYTES",
    "IMPORT_IMAGE_MAX_COUNT",
    "IMPORT_IMAGE_MIN_BYTES",
    "IMPORT_IMAGE_TIMEOUT",
    "IMPORT_USER_AGENT",
]
