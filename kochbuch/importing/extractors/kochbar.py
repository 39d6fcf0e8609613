"""Kochbar extractor.

Kochbar pages often ship JSON-LD without ingredients or instructions. The
ingredient table, the preparation block and the image gallery are read
straight from the markup.
"""

from __future__ import annotations

from kochbuch.importing.extractors import SiteExtractor
from kochbuch.importing.extractors.heuristics import (
    extract_h1_title,
    find_instruction_block,
    find_lazy_img_urls,
    find_list_ingredients,
    find_quoted_image_urls,
    find_srcset_urls,
    find_table_ingredients,
    quoted_image_url_pattern,
)
from kochbuch.importing.models import ExtractedRecipe
from kochbuch.importing.normalize import unique_urls

_EMBEDDED_URL_RE = quoted_image_url_pattern("kochbar")
_SMALL_VARIANT_MARKERS = ("thumb", "_xs", "_s.")


def _is_small_variant(url: str) -> bool:
    return any(marker in url for marker in _SMALL_VARIANT_MARKERS)


def _is_gallery_image(url: str) -> bool:
    if _is_small_variant(url):
        return False
    return "rezeptbild" in url or "kochbar" in url or "/rezept" in url


def _is_embedded_image(url: str) -> bool:
    return not _is_small_variant(url)


def _is_srcset_image(url: str) -> bool:
    return "rezeptbild" in url or "kochbar" in url


class KochbarExtractor(SiteExtractor):
    """Extract title, ingredients, instructions and images from kochbar.de."""

    host_markers = ("kochbar",)

    @property
    def name(self) -> str:
        """Return the name of this extractor."""
        return "kochbar"

    def extract(self, html: str) -> ExtractedRecipe:
        ingredients = find_table_ingredients(html) + find_list_ingredients(html)
        images = unique_urls(
            find_lazy_img_urls(html, _is_gallery_image),
            find_quoted_image_urls(html, _EMBEDDED_URL_RE, _is_embedded_image),
            find_srcset_urls(html, _is_srcset_image),
        )
        return ExtractedRecipe(
            title=extract_h1_title(html),
            images=images,
            ingredients=ingredients,
            instructions=find_instruction_block(html),
        )


__all__ = ["KochbarExtractor"]
