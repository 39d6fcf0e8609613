"""Recipe extractors.

The JSON-LD extractor runs for every page. Site extractors recover data
that particular recipe sites leave out of their structured data; they are
selected by host name from :data:`SITE_EXTRACTORS`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kochbuch.importing.models import ExtractedRecipe

logger = logging.getLogger("kochbuch.imports")


class SiteExtractor(ABC):
    """Abstract base class for site-specific HTML extractors.

    A site extractor turns the raw markup of one site family into a
    partial :class:`ExtractedRecipe`. Fields it cannot find are left
    unset so the merge step can fall back to structured data.
    """

    #: Substrings of the host name that identify the site family.
    host_markers: tuple[str, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this extractor."""

    def matches(self, host: str | None) -> bool:
        """Check if this extractor handles pages from ``host``."""
        if not host:
            return False
        host = host.lower()
        return any(marker in host for marker in self.host_markers)

    @abstractmethod
    def extract(self, html: str) -> ExtractedRecipe:
        """Extract whatever the site's markup reveals.

        Args:
            html: Raw page markup

        Returns:
            Partial recipe data; never raises on unexpected markup
        """


def _build_registry() -> tuple[SiteExtractor, ...]:
    from kochbuch.importing.extractors.chefkoch import ChefkochExtractor
    from kochbuch.importing.extractors.kochbar import KochbarExtractor

    return (ChefkochExtractor(), KochbarExtractor())


SITE_EXTRACTORS: tuple[SiteExtractor, ...] = _build_registry()


def find_site_extractor(
    host: str | None,
    extractors: tuple[SiteExtractor, ...] | None = None,
) -> SiteExtractor | None:
    """Return the first registered extractor matching ``host``."""
    for extractor in SITE_EXTRACTORS if extractors is None else extractors:
        if extractor.matches(host):
            logger.debug("Using %s extractor for %s", extractor.name, host)
            return extractor
    return None


__all__ = [
    "SITE_EXTRACTORS",
    "SiteExtractor",
    "find_site_extractor",
]
