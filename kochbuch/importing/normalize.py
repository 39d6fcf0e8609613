"""Normalization helpers shared by the recipe extractors.

Durations, titles, ingredient lines and image URL lists all arrive in
whatever shape a recipe site happens to use. The helpers here turn them
into the plain values the rest of the pipeline works with and never raise
on odd input.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from typing import Any

from kochbuch.importing.models import Ingredient

_ISO_DURATION_RE = re.compile(r"P(?:(\d+)D)?T(?:(\d+)H)?(?:(\d+)M)?")
_HOUR_RE = re.compile(
    r"(\d+)\s*(?:stunden|stunde|std|hours|hour|hrs|hr|h)(?![a-zäöüß])",
    re.IGNORECASE,
)
_MINUTE_RE = re.compile(
    r"(\d+)\s*(?:minuten|minute|minutes|mins|min|m)(?![a-zäöüß])",
    re.IGNORECASE,
)
_INTEGER_RE = re.compile(r"\d+")

_AUTHOR_SUFFIX_RE = re.compile(r"\s+(?:von|by)\s+\S+$", re.IGNORECASE)

# Longer spellings first so the alternation does not stop at a prefix.
_INGREDIENT_UNITS = (
    "kilogramm",
    "milliliter",
    "gramm",
    "liter",
    "esslöffel",
    "teelöffel",
    "scheiben",
    "scheibe",
    "packungen",
    "packung",
    "päckchen",
    "prisen",
    "prise",
    "dosen",
    "dose",
    "zehen",
    "zehe",
    "tassen",
    "tasse",
    "handvoll",
    "stück",
    "würfel",
    "becher",
    "bund",
    "etwas",
    "cups",
    "cup",
    "tbsp",
    "tsp",
    "pkg",
    "stk",
    "kg",
    "mg",
    "ml",
    "cl",
    "dl",
    "el",
    "tl",
    "oz",
    "lb",
    "g",
    "l",
    r"n\.?\s*b\.?",
)
_UNIT_PATTERN = "|".join(_INGREDIENT_UNITS)
_NUMBER = r"[\d½⅓⅔¼¾⅛][\d½⅓⅔¼¾⅛.,/\s-]*"
_INGREDIENT_RE = re.compile(
    rf"^(?P<amount>(?:{_NUMBER})?\s*(?:{_UNIT_PATTERN})(?!\w)|{_NUMBER})"
    r"\s*(?P<name>[^\d\s].*)$",
    re.IGNORECASE,
)


def parse_time(value: Any) -> int:
    """Parse a duration into whole minutes.

    Accepts ISO-8601 durations (``PT1H30M``), German or English phrases
    (``1 Std. 30 Min.``, ``45 minutes``) and bare numbers. Anything that
    cannot be read yields 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return max(int(value), 0)
    if not isinstance(value, str) or not value.strip():
        return 0

    iso = _ISO_DURATION_RE.search(value)
    if iso and any(iso.groups()):
        days, hours, minutes = (int(part or 0) for part in iso.groups())
        return days * 24 * 60 + hours * 60 + minutes

    total = 0
    hour_match = _HOUR_RE.search(value)
    minute_match = _MINUTE_RE.search(value)
    if hour_match:
        total += int(hour_match.group(1)) * 60
    if minute_match:
        total += int(minute_match.group(1))

    if total == 0:
        plain = _INTEGER_RE.search(value)
        if plain:
            total = int(plain.group(0))

    return total


def clean_title(title: str | None) -> str | None:
    """Strip a trailing author credit such as ``von maria123``."""
    if not title:
        return title

    cleaned = title.strip()
    while True:
        stripped = _AUTHOR_SUFFIX_RE.sub("", cleaned).strip()
        if stripped == cleaned:
            return cleaned
        cleaned = stripped


def split_ingredient(line: str) -> Ingredient:
    """Split an ingredient line into amount and name.

    ``"200 g Mehl"`` becomes ``Ingredient(name="Mehl", amount="200 g")``.
    Lines without a recognizable quantity keep an empty amount.
    """
    text = line.strip()
    match = _INGREDIENT_RE.match(text)
    if match:
        return Ingredient(
            name=match.group("name").strip(),
            amount=match.group("amount").strip(),
        )
    return Ingredient(name=text, amount="")


def first_integer(value: Any) -> int | None:
    """Return the first integer contained in ``value``, if any."""
    if value is None:
        return None
    match = _INTEGER_RE.search(str(value))
    return int(match.group(0)) if match else None


def unique_urls(*groups: Iterable[str]) -> list[str]:
    """Concatenate URL lists, dropping exact duplicates in first-seen order."""
    result: list[str] = []
    seen: set[str] = set()
    for group in groups:
        for url in group:
            if url and url not in seen:
                seen.add(url)
                result.append(url)
    return result


__all__ = [
    "clean_title",
    "first_integer",
    "parse_time",
    "split_ingredient",
    "unique_urls",
]
