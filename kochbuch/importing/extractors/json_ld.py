"""JSON-LD (schema.org Recipe) extractor.

Most recipe sites embed one or more ``application/ld+json`` blocks. A page
may carry several Recipe entries (teasers for related recipes, a second
copy for AMP, ...), so every entry is parsed and the most complete one wins.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterator
from typing import Any

from bs4 import BeautifulSoup

from kochbuch.importing.models import (
    DEFAULT_SERVINGS,
    DEFAULT_WEIGHT_UNIT,
    ExtractedRecipe,
    Ingredient,
)
from kochbuch.importing.normalize import (
    clean_title,
    first_integer,
    parse_time,
    split_ingredient,
    unique_urls,
)

logger = logging.getLogger("kochbuch.imports")

_LD_JSON_TYPE_RE = re.compile(r"application/ld\+json", re.IGNORECASE)


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _is_recipe(node: Any) -> bool:
    if not isinstance(node, dict):
        return False
    types = _as_list(node.get("@type"))
    return any(isinstance(item, str) and item == "Recipe" for item in types)


def iter_json_ld_blocks(html: str) -> Iterator[Any]:
    """Yield the parsed payload of every JSON-LD script block.

    Blocks that are not valid JSON are skipped.
    """
    soup = BeautifulSoup(html, "html.parser")
    for index, script in enumerate(soup.find_all("script", type=_LD_JSON_TYPE_RE)):
        raw = script.string or script.get_text()
        if not raw or not raw.strip():
            continue
        try:
            yield json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.debug("Skipping invalid JSON-LD block %s: %s", index, exc)


def find_recipe_nodes(payload: Any) -> list[dict[str, Any]]:
    """Collect Recipe entries at the top level or inside ``@graph``."""
    recipes: list[dict[str, Any]] = []
    for node in _as_list(payload):
        if not isinstance(node, dict):
            continue
        if _is_recipe(node):
            recipes.append(node)
        for item in _as_list(node.get("@graph")):
            if _is_recipe(item):
                recipes.append(item)
    return recipes


def _parse_ingredients(value: Any) -> list[Ingredient]:
    ingredients: list[Ingredient] = []
    for line in _as_list(value):
        if line is None or isinstance(line, (dict, list)):
            continue
        text = str(line).strip()
        if text:
            ingredients.append(split_ingredient(text))
    return ingredients


def _step_texts(item: Any) -> list[str]:
    """Resolve one ``recipeInstructions`` entry into step texts."""
    if isinstance(item, str):
        return [item]
    if isinstance(item, list):
        return [text for sub in item for text in _step_texts(sub)]
    if not isinstance(item, dict):
        return []

    if "HowToSection" in _as_list(item.get("@type")) and item.get("itemListElement"):
        return [
            text
            for sub in _as_list(item["itemListElement"])
            for text in _step_texts(sub)
        ]

    for key in ("text", "name"):
        text = item.get(key)
        if isinstance(text, str) and text.strip():
            return [text]
    return []


def _parse_instructions(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value

    steps = [text.strip() for text in _step_texts(value) if text.strip()]
    return "\n\n".join(f"{number}. {text}" for number, text in enumerate(steps, 1))


def _image_url(image: Any) -> str | None:
    if isinstance(image, str):
        return image
    if isinstance(image, dict):
        for key in ("url", "contentUrl", "@id"):
            url = image.get(key)
            if isinstance(url, str) and url:
                return url
    return None


def _parse_images(recipe: dict[str, Any]) -> list[str]:
    candidates = [
        *_as_list(recipe.get("image")),
        *_as_list(recipe.get("thumbnailUrl")),
    ]
    return unique_urls(url for url in map(_image_url, candidates) if url)


def _parse_servings(value: Any) -> int:
    if isinstance(value, list):
        value = value[0] if value else None
    servings = first_integer(value)
    return servings if servings else DEFAULT_SERVINGS


def _parse_nutrition(value: Any) -> tuple[int, str]:
    if not isinstance(value, dict):
        return 0, DEFAULT_WEIGHT_UNIT
    calories = first_integer(value.get("calories")) or 0
    serving_size = value.get("servingSize")
    if isinstance(serving_size, (str, int, float)) and str(serving_size).strip():
        return calories, str(serving_size)
    return calories, DEFAULT_WEIGHT_UNIT


def _parse_categories(value: Any) -> list[str]:
    return [item for item in _as_list(value) if isinstance(item, str)]


def parse_recipe_node(recipe: dict[str, Any]) -> ExtractedRecipe:
    """Convert a schema.org Recipe object into an :class:`ExtractedRecipe`."""
    calories, weight_unit = _parse_nutrition(recipe.get("nutrition"))
    name = recipe.get("name")

    return ExtractedRecipe(
        title=clean_title(name if isinstance(name, str) else ""),
        images=_parse_images(recipe),
        ingredients=_parse_ingredients(recipe.get("recipeIngredient")),
        instructions=_parse_instructions(recipe.get("recipeInstructions")),
        prep_time=parse_time(recipe.get("prepTime")),
        cook_time=parse_time(recipe.get("cookTime")),
        rest_time=0,
        total_time=parse_time(recipe.get("totalTime")),
        servings=_parse_servings(recipe.get("recipeYield")),
        calories_per_unit=calories,
        weight_unit=weight_unit,
        categories=_parse_categories(recipe.get("recipeCategory")),
    )


def extract_structured_data(html: str) -> ExtractedRecipe | None:
    """Extract the most complete JSON-LD recipe from ``html``.

    Returns:
        The highest ranked recipe, or None if the page has no Recipe entry.
    """
    candidates: list[ExtractedRecipe] = []
    for payload in iter_json_ld_blocks(html):
        for node in find_recipe_nodes(payload):
            try:
                candidates.append(parse_recipe_node(node))
            except Exception as exc:
                logger.debug("Skipping unreadable JSON-LD recipe: %s", exc)

    if not candidates:
        return None

    # sorted() is stable, so equal scores keep discovery order.
    ranked = sorted(candidates, key=lambda item: item.completeness_score, reverse=True)
    best = ranked[0]
    logger.info(
        "Found %s JSON-LD recipes, selected one with %s ingredients",
        len(candidates),
        len(best.ingredients),
    )
    return best


__all__ = [
    "extract_structured_data",
    "find_recipe_nodes",
    "iter_json_ld_blocks",
    "parse_recipe_node",
]
