"""Combine structured data with site-specific HTML data.

Structured data is the more reliable source for text, but sites tend to
list only one or two images in it. Images are therefore unioned, while
every other field prefers the structured value.
"""

from __future__ import annotations

from dataclasses import replace

from kochbuch.importing.models import ExtractedRecipe
from kochbuch.importing.normalize import unique_urls


def merge_site_data(
    structured: ExtractedRecipe | None,
    html: ExtractedRecipe | None,
) -> ExtractedRecipe | None:
    """Merge JSON-LD and site extractor results.

    Args:
        structured: Result of the JSON-LD extractor
        html: Partial result of the site extractor

    Returns:
        The merged recipe, or None if both inputs are None
    """
    if html is None:
        return structured
    if structured is None:
        return replace(html, images=unique_urls(html.images))

    # An empty structured title still counts as a found recipe.
    title = structured.title or html.title
    if title is None:
        title = structured.title

    return replace(
        structured,
        images=unique_urls(structured.images, html.images),
        title=title,
        instructions=structured.instructions or html.instructions,
        ingredients=list(structured.ingredients or html.ingredients),
    )


__all__ = ["merge_site_data"]
