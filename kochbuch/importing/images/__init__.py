"""Image acquisition utilities.

Downloads the images discovered on a recipe page and embeds them as
``data:`` URIs so the stored recipe does not depend on the source site.

Example:
    from kochbuch.importing.images import ImageDownloader

    downloader = ImageDownloader()
    result = await downloader.download_images(
        ["https://example.com/soup.jpg"],
        limit=5,
    )

    for img in result.images:
        print(f"Embedded: {img.url} ({img.content_type}, {img.size} bytes)")
"""

from __future__ import annotations

# Constants
from kochbuch.importing.images.constants import (
    IMPORT_IMAGE_DEFAULT_TYPE,
    IMPORT_IMAGE_HEADERS,
    IMPORT_IMAGE_MAX_BYTES,
    IMPORT_IMAGE_MAX_COUNT,
    IMPORT_IMAGE_MIN_BYTES,
    IMPORT_IMAGE_TIMEOUT,
    IMPORT_USER_AGENT,
)

# Downloader
from kochbuch.importing.images.downloader import (
    DownloadedImage,
    ImageDownloader,
    ImageDownloadResult,
    acquire_images,
    encode_data_uri,
)

# Validation utilities
from kochbuch.importing.images.validator import (
    check_image_size,
    is_data_uri,
    is_valid_import_url,
    normalize_content_type,
    validate_import_url,
)

__all__ = [
    # Constants
    "IMPORT_IMAGE_DEFAULT_TYPE",
    "IMPORT_IMAGE_HEADERS",
    "IMPORT_IMAGE_MAX_BYTES",
    "IMPORT_IMAGE_MAX_COUNT",
    "IMPORT_IMAGE_MIN_BYTES",
    "IMPORT_IMAGE_TIMEOUT",
    "IMPORT_USER_AGENT",
    # Downloader
    "DownloadedImage",
    "ImageDownloadResult",
    "ImageDownloader",
    "acquire_images",
    "encode_data_uri",
    # Validation
    "check_image_size",
    "is_data_uri",
    "is_valid_import_url",
    "normalize_content_type",
    "validate_import_url",
]
