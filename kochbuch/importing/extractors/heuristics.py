"""Markup heuristics used by the site-specific extractors.

Each function takes raw HTML and returns what it found, or an empty
result. None of them raise on unexpected markup, so extractors can
combine them freely.
"""

from __future__ import annotations

import html as html_lib
import re
from collections.abc import Callable, Iterable

from bs4 import BeautifulSoup

from kochbuch.importing.models import Ingredient
from kochbuch.importing.normalize import clean_title, split_ingredient

UrlFilter = Callable[[str], bool]

_AMP_IMG_RE = re.compile(r"amp-img[^>]*src=[\"']([^\"']+)[\"']", re.IGNORECASE)
_IMG_SRC_RE = re.compile(r"<img[^>]*\ssrc=[\"']([^\"']+)[\"']", re.IGNORECASE)
_IMG_TAG_RE = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
_DATA_SRC_ATTR_RE = re.compile(r"\sdata-src=[\"']([^\"']+)[\"']", re.IGNORECASE)
_SRC_ATTR_RE = re.compile(r"\ssrc=[\"']([^\"']+)[\"']", re.IGNORECASE)
_SRCSET_RE = re.compile(r"srcset=[\"']([^\"']+)[\"']", re.IGNORECASE)
_TABLE_ROW_RE = re.compile(
    r"<tr[^>]*>\s*<td[^>]*>([^<]+)</td>\s*<td[^>]*>([^<]+)</td>\s*</tr>",
    re.IGNORECASE,
)
_INGREDIENT_ITEM_RE = re.compile(
    r"<li[^>]*class=\"[^\"]*ingredient[^\"]*\"[^>]*>([^<]+)</li>", re.IGNORECASE
)
_INSTRUCTION_BLOCK_RE = re.compile(
    r"<(div|section)\b[^>]*class=\"[^\"]*(?:instruction|preparation|zubereitung)"
    r"[^\"]*\"[^>]*>(.*?)</\1>",
    re.IGNORECASE | re.DOTALL,
)
_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_PARAGRAPH_END_RE = re.compile(r"</p>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")

_HEADER_NAMES = {"zutat", "zutaten"}


def quoted_image_url_pattern(
    marker: str, *, allow_query: bool = True
) -> re.Pattern[str]:
    """Match quoted absolute image URLs whose text contains ``marker``.

    The scheme separator may be JSON-escaped (``https:\\/\\/`` or
    ``https:\\u002F\\u002F``). Without ``allow_query`` the URL must end
    in the image extension. Quoted strings containing whitespace (such as
    ``srcset`` values) never match.
    """
    return re.compile(
        r"[\"'](https?:(?:\\?/|\\u002[fF]){2}[^\"'\s]*?"
        + marker
        + r"[^\"'\s]*?\.(?:jpg|jpeg|png|webp)"
        + (r"[^\"'\s]*" if allow_query else "")
        + r")[\"']",
        re.IGNORECASE,
    )


def unescape_url(url: str) -> str:
    """Undo JSON escaping of slashes in an embedded URL."""
    return url.replace("\\u002F", "/").replace("\\u002f", "/").replace("\\/", "/")


def _matching(urls: Iterable[str], accept: UrlFilter) -> list[str]:
    return [url for url in urls if url and accept(url)]


def extract_h1_title(html: str) -> str | None:
    """Text of the first ``<h1>``, cleaned of author credits."""
    heading = BeautifulSoup(html, "html.parser").find("h1")
    if heading is None:
        return None
    text = " ".join(heading.get_text(" ", strip=True).split())
    return clean_title(text) or None


def find_amp_img_urls(html: str, accept: UrlFilter) -> list[str]:
    """``src`` of every ``<amp-img>`` accepted by ``accept``."""
    return _matching(_AMP_IMG_RE.findall(html), accept)


def find_img_src_urls(html: str, accept: UrlFilter) -> list[str]:
    """``src`` of every ``<img>`` accepted by ``accept``."""
    return _matching(_IMG_SRC_RE.findall(html), accept)


def find_lazy_img_urls(html: str, accept: UrlFilter) -> list[str]:
    """``data-src`` (else ``src``) of every ``<img>`` accepted by ``accept``."""
    urls: list[str] = []
    for tag in _IMG_TAG_RE.findall(html):
        match = _DATA_SRC_ATTR_RE.search(tag) or _SRC_ATTR_RE.search(tag)
        if match:
            urls.append(match.group(1))
    return _matching(urls, accept)


def find_quoted_image_urls(
    html: str, pattern: re.Pattern[str], accept: UrlFilter
) -> list[str]:
    """Image URLs embedded as quoted strings (data attributes, inline JSON)."""
    return _matching((unescape_url(url) for url in pattern.findall(html)), accept)


def find_srcset_urls(html: str, accept: UrlFilter) -> list[str]:
    """First URL token of each ``srcset`` candidate accepted by ``accept``."""
    urls: list[str] = []
    for srcset in _SRCSET_RE.findall(html):
        for candidate in srcset.split(","):
            parts = candidate.strip().split()
            if parts:
                urls.append(parts[0])
    return _matching(urls, accept)


def find_table_ingredients(html: str) -> list[Ingredient]:
    """Two-cell table rows read as ingredient name and amount."""
    ingredients: list[Ingredient] = []
    for raw_name, raw_amount in _TABLE_ROW_RE.findall(html):
        name = html_lib.unescape(raw_name).strip()
        amount = html_lib.unescape(raw_amount).strip()
        if not name or name.lower() in _HEADER_NAMES or "Zutaten" in name:
            continue
        ingredients.append(Ingredient(name=name, amount=amount))
    return ingredients


def find_list_ingredients(html: str) -> list[Ingredient]:
    """``<li class="...ingredient...">`` items split into amount and name."""
    ingredients: list[Ingredient] = []
    for raw in _INGREDIENT_ITEM_RE.findall(html):
        text = html_lib.unescape(raw).strip()
        if text:
            ingredients.append(split_ingredient(text))
    return ingredients


def find_instruction_block(html: str) -> str | None:
    """Plain text of the first instructions/preparation container."""
    match = _INSTRUCTION_BLOCK_RE.search(html)
    if not match:
        return None

    text = _BR_RE.sub("\n", match.group(2))
    text = _PARAGRAPH_END_RE.sub("\n\n", text)
    text = _TAG_RE.sub("", text)
    text = html_lib.unescape(text).replace("\xa0", " ")
    text = re.sub(r"[ \t]*\n[ \t]*", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text).strip()
    return text or None


__all__ = [
    "UrlFilter",
    "extract_h1_title",
    "find_amp_img_urls",
    "find_img_src_urls",
    "find_instruction_block",
    "find_lazy_img_urls",
    "find_list_ingredients",
    "find_quoted_image_urls",
    "find_srcset_urls",
    "find_table_ingredients",
    "quoted_image_url_pattern",
    "unescape_url",
]
