"""Image import validation utilities.

Validates URLs, content types and payload sizes for image acquisition.
"""

from __future__ import annotations

import re
from urllib.parse import urlparse

from kochbuch.importing.images.constants import (
    IMPORT_IMAGE_DEFAULT_TYPE,
    IMPORT_IMAGE_MAX_BYTES,
    IMPORT_IMAGE_MIN_BYTES,
)

_MIME_TYPE_RE = re.compile(r"^[\w.+-]+/[\w.+-]+$")


def is_data_uri(url: str) -> bool:
    """Check if ``url`` is already an embedded ``data:`` URI."""
    return url.startswith("data:")


def is_valid_import_url(url: str) -> bool:
    """Ensure the import URL uses http(s) and has a host."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def validate_import_url(url: str) -> tuple[bool, str | None]:
    """Validate an import URL and return status with reason.

    Args:
        url: URL to validate

    Returns:
        Tuple of (is_valid, reason_if_invalid)
    """
    if not url:
        return False, "URL is empty"

    try:
        parsed = urlparse(url)
    except ValueError as exc:
        return False, str(exc)

    if parsed.scheme not in {"http", "https"}:
        return False, f"Invalid scheme: {parsed.scheme}"

    if not parsed.netloc:
        return False, "Missing host"

    return True, None


def normalize_content_type(content_type: str | None) -> str:
    """Strip parameters from a content type, defaulting to JPEG.

    ``"image/png; charset=binary"`` becomes ``"image/png"``; a missing or
    malformed header yields ``image/jpeg``.
    """
    if not content_type:
        return IMPORT_IMAGE_DEFAULT_TYPE
    normalized = content_type.split(";", 1)[0].strip().lower()
    if not _MIME_TYPE_RE.match(normalized):
        return IMPORT_IMAGE_DEFAULT_TYPE
    return normalized


def check_image_size(
    size: int,
    *,
    min_bytes: int = IMPORT_IMAGE_MIN_BYTES,
    max_bytes: int = IMPORT_IMAGE_MAX_BYTES,
) -> str | None:
    """Return the reason an image of ``size`` bytes is rejected, if any."""
    if size > max_bytes:
        return f"too large ({size / 1024 / 1024:.2f} MB)"
    if size < min_bytes:
        return f"too small ({size} bytes)"
    return None


__all__ = [
    "check_image_size",
    "is_data_uri",
    "is_valid_import_url",
    "normalize_content_type",
    "validate_import_url",
]
