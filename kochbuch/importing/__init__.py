"""Recipe importing package.

The import pipeline has four stages:
1. **Source** - Fetches the recipe page (:class:`URLSource`)
2. **Extractors** - JSON-LD for every page, plus a site extractor for
   known recipe sites (Chefkoch, Kochbar)
3. **Merge** - Combines both results, structured data first
4. **Images** - Downloads discovered images and embeds them as data URIs

Example:
    from kochbuch.importing import RecipeImporter

    importer = RecipeImporter()
    recipe = await importer.import_from_url("https://www.chefkoch.de/rezepte/...")
    payload = recipe.to_dict()
"""

from __future__ import annotations

from kochbuch.importing.errors import (
    FetchError,
    InvalidUrlError,
    NoRecipeFoundError,
    RecipeImportError,
)
from kochbuch.importing.extractors import (
    SITE_EXTRACTORS,
    SiteExtractor,
    find_site_extractor,
)
from kochbuch.importing.extractors.json_ld import extract_structured_data
from kochbuch.importing.images import ImageDownloader, acquire_images
from kochbuch.importing.merge import merge_site_data
from kochbuch.importing.models import (
    ExtractedRecipe,
    ImportedRecipe,
    Ingredient,
    RawContent,
)
from kochbuch.importing.normalize import (
    clean_title,
    parse_time,
    split_ingredient,
    unique_urls,
)
from kochbuch.importing.pipeline import RecipeImporter, import_from_url
from kochbuch.importing.sources import URLSource

__all__ = [
    # Errors
    "FetchError",
    "InvalidUrlError",
    "NoRecipeFoundError",
    "RecipeImportError",
    # Models
    "ExtractedRecipe",
    "ImportedRecipe",
    "Ingredient",
    "RawContent",
    # Normalization
    "clean_title",
    "parse_time",
    "split_ingredient",
    "unique_urls",
    # Extractors
    "SITE_EXTRACTORS",
    "SiteExtractor",
    "extract_structured_data",
    "find_site_extractor",
    "merge_site_data",
    # Images
    "ImageDownloader",
    "acquire_images",
    # Pipeline
    "RecipeImporter",
    "URLSource",
    "import_from_url",
]
