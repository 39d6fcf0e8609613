"""Chefkoch extractor.

Chefkoch's JSON-LD usually lists a single image while the page carries a
whole gallery, so this extractor mainly collects gallery images.
"""

from __future__ import annotations

from kochbuch.importing.extractors import SiteExtractor
from kochbuch.importing.extractors.heuristics import (
    extract_h1_title,
    find_amp_img_urls,
    find_img_src_urls,
    find_quoted_image_urls,
    quoted_image_url_pattern,
)
from kochbuch.importing.models import ExtractedRecipe
from kochbuch.importing.normalize import unique_urls

_GALLERY_URL_RE = quoted_image_url_pattern(
    r"(?:/rezepte/|bilder\.)", allow_query=False
)
_SMALL_VARIANT_MARKERS = ("thumb", "_w100", "_w200")


def _is_amp_gallery_image(url: str) -> bool:
    return "/rezepte/" in url or "bilder.t-online" in url or "chefkoch" in url


def _is_gallery_image(url: str) -> bool:
    return "/rezepte/" in url or "bilder.t-online" in url


def _is_large_variant(url: str) -> bool:
    return not any(marker in url for marker in _SMALL_VARIANT_MARKERS)


class ChefkochExtractor(SiteExtractor):
    """Extract title and gallery images from chefkoch.de pages."""

    host_markers = ("chefkoch",)

    @property
    def name(self) -> str:
        """Return the name of this extractor."""
        return "chefkoch"

    def extract(self, html: str) -> ExtractedRecipe:
        images = unique_urls(
            find_amp_img_urls(html, _is_amp_gallery_image),
            find_img_src_urls(html, _is_gallery_image),
            find_quoted_image_urls(html, _GALLERY_URL_RE, _is_large_variant),
        )
        return ExtractedRecipe(title=extract_h1_title(html), images=images)


__all__ = ["ChefkochExtractor"]
