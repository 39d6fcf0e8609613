"""Recipe import orchestrator.

Coordinates the flow: page → JSON-LD → site extractor + merge → images →
ImportedRecipe.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import anyio

from kochbuch.config import config
from kochbuch.importing.errors import NoRecipeFoundError
from kochbuch.importing.extractors import SITE_EXTRACTORS, find_site_extractor
from kochbuch.importing.extractors.json_ld import extract_structured_data
from kochbuch.importing.images.downloader import ImageDownloader
from kochbuch.importing.merge import merge_site_data
from kochbuch.importing.models import ImportedRecipe
from kochbuch.importing.sources.url import URLSource

if TYPE_CHECKING:
    from kochbuch.importing.extractors import SiteExtractor
    from kochbuch.importing.models import ExtractedRecipe, RawContent

logger = logging.getLogger("kochbuch.imports")


class RecipeImporter:
    """Imports a recipe from a web page.

    The importer runs a linear pipeline:
    1. Fetch the page (errors abort the import)
    2. Extract JSON-LD recipe data
    3. Run the site extractor for known hosts and merge its result
    4. Download and embed the images
    5. Fill defaults and return an ImportedRecipe

    Extraction and image failures degrade to less data, never to an error.

    Example:
        importer = RecipeImporter()
        recipe = await importer.import_from_url("https://www.chefkoch.de/rezepte/...")
    """

    def __init__(
        self,
        *,
        image_limit: int | None = None,
        page_timeout: int | None = None,
        downloader: ImageDownloader | None = None,
        site_extractors: tuple[SiteExtractor, ...] = SITE_EXTRACTORS,
    ) -> None:
        """Initialize the importer.

        Args:
            image_limit: Max images to embed per recipe
            page_timeout: Timeout for the page fetch in seconds
            downloader: Image downloader to use
            site_extractors: Site extractors to consult, in order
        """
        self.image_limit = (
            config.IMPORT_IMAGE_MAX_COUNT if image_limit is None else image_limit
        )
        self.page_timeout = page_timeout
        self.downloader = downloader or ImageDownloader(max_count=self.image_limit)
        self.site_extractors = site_extractors

    async def import_from_url(self, url: str) -> ImportedRecipe:
        """Import the recipe published at ``url``.

        Raises:
            InvalidUrlError: If ``url`` is not an absolute http(s) URL
            FetchError: If the page cannot be retrieved
            NoRecipeFoundError: If no extractor found a recipe
        """
        source = URLSource(url, timeout=self.page_timeout)
        page = await source.fetch()

        recipe = await self.extract(page)
        if recipe is None or recipe.title is None:
            raise NoRecipeFoundError(f"No recipe found at {url}", url=url)

        logger.info(
            "Imported recipe data: title=%r ingredients=%s images=%s "
            "has_instructions=%s servings=%s",
            recipe.title,
            len(recipe.ingredients),
            len(recipe.images),
            bool(recipe.instructions),
            recipe.servings,
        )

        download = await self.downloader.download_images(
            recipe.images, limit=self.image_limit
        )
        logger.info("Downloaded %s images as Base64", download.count)

        return ImportedRecipe.from_extracted(
            recipe,
            images=download.data_uris,
            source_url=url,
        )

    async def extract(self, page: RawContent) -> ExtractedRecipe | None:
        """Run the extractors over a fetched page and merge their results."""
        html = page.content

        structured: ExtractedRecipe | None = None
        try:
            structured = await anyio.to_thread.run_sync(extract_structured_data, html)
        except Exception as exc:
            logger.warning("JSON-LD extraction failed for %s: %s", page.source_url, exc)

        extractor = find_site_extractor(page.host, self.site_extractors)
        if extractor is None:
            return structured

        site_data: ExtractedRecipe | None = None
        try:
            site_data = await anyio.to_thread.run_sync(extractor.extract, html)
        except Exception as exc:
            logger.warning(
                "Extractor %s failed for %s: %s", extractor.name, page.source_url, exc
            )

        return merge_site_data(structured, site_data)


async def import_from_url(url: str) -> ImportedRecipe:
    """Import a recipe with the default configuration."""
    return await RecipeImporter().import_from_url(url)


__all__ = ["RecipeImporter", "import_from_url"]
