"""Download recipe images and embed them as data URIs.

Images are fetched one at a time. Keeping a single outstanding request
per import bounds the load an import puts on the recipe site.
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import httpx

from kochbuch.importing.images.constants import (
    IMPORT_IMAGE_HEADERS,
    IMPORT_IMAGE_MAX_BYTES,
    IMPORT_IMAGE_MAX_COUNT,
    IMPORT_IMAGE_MIN_BYTES,
    IMPORT_IMAGE_TIMEOUT,
)
from kochbuch.importing.images.validator import (
    check_image_size,
    is_data_uri,
    is_valid_import_url,
    normalize_content_type,
)

logger = logging.getLogger("kochbuch.imports")


@dataclass
class DownloadedImage:
    """An image ready to be embedded in the recipe."""

    url: str
    data_uri: str
    content_type: str
    size: int = 0


@dataclass
class ImageDownloadResult:
    """Result of a batch image download operation."""

    images: list[DownloadedImage] = field(default_factory=list)
    skipped: list[tuple[str, str]] = field(default_factory=list)  # (url, reason)
    errors: list[tuple[str, str]] = field(default_factory=list)  # (url, error)

    @property
    def count(self) -> int:
        """Number of successfully acquired images."""
        return len(self.images)

    @property
    def data_uris(self) -> list[str]:
        """Embedded forms of the acquired images, in input order."""
        return [image.data_uri for image in self.images]


def encode_data_uri(content: bytes, content_type: str | None) -> str:
    """Wrap raw image bytes as a base64 ``data:`` URI."""
    mime_type = normalize_content_type(content_type)
    payload = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


class ImageDownloader:
    """Downloads images and converts them to embedded data URIs.

    Handles:
    - passing through URIs that are already embedded
    - skipping non-http(s) URLs
    - HTTP downloading with browser headers and a timeout
    - size limits (placeholder-small and oversized images are dropped)

    Example:
        downloader = ImageDownloader()
        result = await downloader.download_images(
            ["https://example.com/soup.jpg"],
            limit=5,
        )
        images = result.data_uris
    """

    def __init__(
        self,
        *,
        timeout: int = IMPORT_IMAGE_TIMEOUT,
        min_bytes: int = IMPORT_IMAGE_MIN_BYTES,
        max_bytes: int = IMPORT_IMAGE_MAX_BYTES,
        max_count: int = IMPORT_IMAGE_MAX_COUNT,
    ) -> None:
        """Initialize the downloader.

        Args:
            timeout: HTTP request timeout in seconds, per image
            min_bytes: Minimum accepted image size in bytes
            max_bytes: Maximum accepted image size in bytes
            max_count: Default number of URLs to process
        """
        self.timeout = timeout
        self.min_bytes = min_bytes
        self.max_bytes = max_bytes
        self.max_count = max_count
        self._headers = dict(IMPORT_IMAGE_HEADERS)

    async def download_images(
        self,
        image_urls: Sequence[str],
        *,
        limit: int | None = None,
    ) -> ImageDownloadResult:
        """Download and embed a batch of images.

        Only the first ``limit`` URLs are processed; the rest are ignored.
        Failed URLs are recorded on the result and never raise.

        Args:
            image_urls: URLs in discovery order
            limit: Max URLs to process (defaults to max_count from init)

        Returns:
            Download result with images, skipped list, and errors
        """
        result = ImageDownloadResult()
        max_images = self.max_count if limit is None else max(limit, 0)
        candidates = list(image_urls)[:max_images]
        if not candidates:
            return result

        logger.info("Downloading %s images...", len(candidates))

        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers=self._headers,
        ) as client:
            for url in candidates:
                if is_data_uri(url):
                    result.images.append(
                        DownloadedImage(
                            url=url,
                            data_uri=url,
                            content_type=normalize_content_type(
                                url[5:].split(";", 1)[0].split(",", 1)[0]
                            ),
                        )
                    )
                    continue

                if not is_valid_import_url(url):
                    result.skipped.append((url, "invalid URL"))
                    continue

                try:
                    downloaded = await self._download_single(client, url, result)
                except Exception as exc:
                    error_msg = str(exc) or exc.__class__.__name__
                    logger.debug("Failed to download image %s: %s", url, error_msg)
                    result.errors.append((url, error_msg))
                    continue

                if downloaded is not None:
                    result.images.append(downloaded)
                    logger.debug(
                        "Downloaded image %s/%s", result.count, len(candidates)
                    )

        logger.info("Successfully downloaded %s images", result.count)
        return result

    async def _download_single(
        self,
        client: httpx.AsyncClient,
        url: str,
        result: ImageDownloadResult,
    ) -> DownloadedImage | None:
        """Download and validate a single image.

        Returns:
            DownloadedImage if successful, None if skipped
        """
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            reason = f"HTTP {exc.response.status_code}"
            logger.debug("Failed to download image %s: %s", url, reason)
            result.errors.append((url, reason))
            return None
        except httpx.HTTPError as exc:
            reason = str(exc) or exc.__class__.__name__
            logger.debug("HTTP error for %s: %s", url, reason)
            result.errors.append((url, reason))
            return None

        content = response.content or b""
        rejection = check_image_size(
            len(content), min_bytes=self.min_bytes, max_bytes=self.max_bytes
        )
        if rejection:
            logger.debug("Skipping image %s: %s", url, rejection)
            result.skipped.append((url, rejection))
            return None

        content_type = normalize_content_type(response.headers.get("content-type"))
        return DownloadedImage(
            url=url,
            data_uri=encode_data_uri(content, content_type),
            content_type=content_type,
            size=len(content),
        )


async def acquire_images(
    image_urls: Sequence[str],
    max_count: int = IMPORT_IMAGE_MAX_COUNT,
) -> list[str]:
    """Embed up to ``max_count`` images, dropping any that fail."""
    result = await ImageDownloader(max_count=max_count).download_images(
        image_urls, limit=max_count
    )
    return result.data_uris


__all__ = [
    "DownloadedImage",
    "ImageDownloadResult",
    "ImageDownloader",
    "acquire_images",
    "encode_data_uri",
]
