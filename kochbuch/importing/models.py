"""Core data models for the recipe import pipeline.

These models represent the data that flows through the pipeline
from page → extractors → merge → image acquisition → response.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlparse

DEFAULT_TITLE = "Importiertes Rezept"
DEFAULT_SERVINGS = 4
DEFAULT_WEIGHT_UNIT = "100g"


@dataclass
class Ingredient:
    """A single ingredient line split into name and amount."""

    name: str
    amount: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "amount": self.amount}


@dataclass
class RawContent:
    """A fetched page before extraction."""

    content: str
    source_url: str
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def host(self) -> str:
        """Lower-cased host name of the source URL."""
        return (urlparse(self.source_url).hostname or "").lower()


@dataclass
class ExtractedRecipe:
    """Structured data recovered from a page.

    Scalar fields are ``None`` when an extractor did not find them, so the
    merge step can tell "not found" apart from "found empty".
    """

    title: str | None = None
    images: list[str] = field(default_factory=list)
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: str | None = None

    # Times in minutes
    prep_time: int | None = None
    cook_time: int | None = None
    rest_time: int | None = None
    total_time: int | None = None

    servings: int | None = None

    # Nutrition
    calories_per_unit: int | None = None
    weight_unit: str | None = None

    categories: list[str] = field(default_factory=list)

    @property
    def completeness_score(self) -> int:
        """Ranking value used to pick among several structured candidates."""
        return 100 * len(self.ingredients) + len(self.instructions or "")


@dataclass
class ImportedRecipe:
    """Final, fully populated result of a recipe import."""

    title: str
    source_url: str
    images: list[str] = field(default_factory=list)
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: str = ""
    prep_time: int = 0
    rest_time: int = 0
    cook_time: int = 0
    total_time: int = 0
    servings: int = DEFAULT_SERVINGS
    calories_per_unit: int = 0
    weight_unit: str = DEFAULT_WEIGHT_UNIT
    categories: list[str] = field(default_factory=list)

    @classmethod
    def from_extracted(
        cls,
        recipe: ExtractedRecipe,
        *,
        images: list[str],
        source_url: str,
    ) -> ImportedRecipe:
        """Fill defaults for everything the extractors left open."""
        from kochbuch.importing.normalize import clean_title

        prep_time = recipe.prep_time or 0
        cook_time = recipe.cook_time or 0

        return cls(
            title=clean_title(recipe.title or "") or DEFAULT_TITLE,
            source_url=source_url,
            images=list(images),
            ingredients=list(recipe.ingredients),
            instructions=recipe.instructions or "",
            prep_time=prep_time,
            rest_time=recipe.rest_time or 0,
            cook_time=cook_time,
            total_time=recipe.total_time or prep_time + cook_time,
            servings=recipe.servings or DEFAULT_SERVINGS,
            calories_per_unit=recipe.calories_per_unit or 0,
            weight_unit=recipe.weight_unit or DEFAULT_WEIGHT_UNIT,
            categories=list(recipe.categories),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape returned by the import endpoint."""
        return {
            "title": self.title,
            "images": self.images,
            "ingredients": [ingredient.to_dict() for ingredient in self.ingredients],
            "instructions": self.instructions,
            "prepTime": self.prep_time,
            "restTime": self.rest_time,
            "cookTime": self.cook_time,
            "totalTime": self.total_time,
            "servings": self.servings,
            "caloriesPerUnit": self.calories_per_unit,
            "weightUnit": self.weight_unit,
            "categories": self.categories,
            "sourceUrl": self.source_url,
        }


__all__ = [
    "DEFAULT_SERVINGS",
    "DEFAULT_TITLE",
    "DEFAULT_WEIGHT_UNIT",
    "ExtractedRecipe",
    "ImportedRecipe",
    "Ingredient",
    "RawContent",
]
