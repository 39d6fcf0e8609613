"""URL-based page source.

Fetches recipe pages from HTTP/HTTPS URLs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from kochbuch.config import config
from kochbuch.importing.errors import FetchError, InvalidUrlError
from kochbuch.importing.images.constants import IMPORT_USER_AGENT
from kochbuch.importing.images.validator import validate_import_url
from kochbuch.importing.models import RawContent

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger("kochbuch.imports")


class URLSource:
    """Fetches a recipe page without cookies or credentials."""

    def __init__(
        self,
        url: str,
        *,
        timeout: int | None = None,
        headers: Mapping[str, str] | None = None,
        follow_redirects: bool = True,
    ) -> None:
        """Initialize the URL source.

        Args:
            url: The URL to fetch
            timeout: HTTP request timeout in seconds
            headers: Optional custom HTTP headers
            follow_redirects: Whether to follow HTTP redirects
        """
        self.url = url
        self.timeout = config.IMPORT_PAGE_TIMEOUT if timeout is None else timeout
        self.headers = dict(headers) if headers else {}
        self.follow_redirects = follow_redirects

        # Default headers to appear more like a browser
        self.headers.setdefault("User-Agent", IMPORT_USER_AGENT)
        self.headers.setdefault(
            "Accept", "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
        )
        self.headers.setdefault("Accept-Language", config.IMPORT_ACCEPT_LANGUAGE)

    def validate(self) -> None:
        """Raise :class:`InvalidUrlError` unless the URL is absolute http(s)."""
        is_valid, reason = validate_import_url(self.url)
        if not is_valid:
            raise InvalidUrlError(f"Invalid URL: {reason}", url=self.url)

    async def fetch(self) -> RawContent:
        """Fetch the page.

        Returns:
            RawContent containing the page HTML

        Raises:
            InvalidUrlError: If the URL is not absolute http(s)
            FetchError: If the request fails or returns a non-success status
        """
        self.validate()

        logger.info("Fetching recipe page %s", self.url)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=self.follow_redirects,
                headers=self.headers,
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()

        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"HTTP {exc.response.status_code} for {self.url}",
                url=self.url,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(
                f"Failed to fetch {self.url}: {exc.__class__.__name__}",
                url=self.url,
            ) from exc

        logger.debug(
            "Fetched %s bytes from %s",
            len(response.content),
            self.url,
        )

        return RawContent(
            content=response.text,
            source_url=self.url,
            metadata={
                "status_code": response.status_code,
                "final_url": str(response.url),
                "encoding": response.encoding,
            },
        )


__all__ = ["URLSource"]
