from __future__ import annotations

import pytest

from kochbuch.importing.extractors import SITE_EXTRACTORS, find_site_extractor
from kochbuch.importing.extractors.chefkoch import ChefkochExtractor
from kochbuch.importing.extractors.heuristics import (
    extract_h1_title,
    find_instruction_block,
    find_srcset_urls,
    find_table_ingredients,
    unescape_url,
)
from kochbuch.importing.extractors.kochbar import KochbarExtractor
from kochbuch.importing.models import Ingredient

CHEFKOCH_IMG = (
    "https://img.chefkoch-cdn.de/rezepte/123/bilder/{n}/crop-960x640/gulasch.jpg"
)

CHEFKOCH_HTML = f"""
<html><body>
<h1>Omas Gulasch von kochfan42</h1>
<amp-img layout="responsive" src="{CHEFKOCH_IMG.format(n=1)}"></amp-img>
<img class="hero" src="{CHEFKOCH_IMG.format(n=2)}">
<img src="https://www.chefkoch.de/img/logo.png">
<div data-gallery='["{CHEFKOCH_IMG.format(n=3)}",
  "https://img.chefkoch-cdn.de/rezepte/123/bilder/4/thumb/gulasch.jpg"]'></div>
</body></html>
"""

KOCHBAR_IMG = "https://ais.kochbar.de/kbrezept/123_456/{size}/kaesespaetzle.jpg"
KOCHBAR_ESCAPED_IMG = (
    "https:\\/\\/ais.kochbar.de\\/kbrezept\\/123_456\\/800x800\\/kaesespaetzle2.jpg"
)

KOCHBAR_HTML = f"""
<html><body>
<h1>Käsespätzle by spaetzlefan</h1>
<img data-src="{KOCHBAR_IMG.format(size='1200x1200')}" src="/img/placeholder.gif">
<img src="https://ais.kochbar.de/kbrezept/123_456/thumb/kaesespaetzle_xs.jpg">
<img src="https://static.example.com/banner.jpg">
<table>
<tr><td>Zutaten</td><td>Menge</td></tr>
<tr><td>Mehl</td><td>500 g</td></tr>
<tr><td>Eier</td><td>5</td></tr>
</table>
<ul>
<li class="ingredient">200 g Bergkäse</li>
<li class="ingredient">2 Zwiebeln</li>
</ul>
<div class="recipe-instructions"><p>Teig anrühren.<br>Ruhen lassen.</p>

<p>Spätzle&nbsp;schaben.</p></div>
<picture><source srcset="{KOCHBAR_IMG.format(size='600x600')} 600w,
  {KOCHBAR_IMG.format(size='1200x1200')} 1200w"></picture>
<script>var gallery = {{"src":"{KOCHBAR_ESCAPED_IMG}"}};</script>
</body></html>
"""


@pytest.mark.parametrize(
    ("host", "expected"),
    [
        ("www.chefkoch.de", "chefkoch"),
        ("m.chefkoch.de", "chefkoch"),
        ("www.kochbar.de", "kochbar"),
        ("WWW.KOCHBAR.DE", "kochbar"),
    ],
)
def test_find_site_extractor_matches_host(host: str, expected: str) -> None:
    extractor = find_site_extractor(host)
    assert extractor is not None
    assert extractor.name == expected


@pytest.mark.parametrize("host", ["example.com", "", None])
def test_find_site_extractor_without_match(host: str | None) -> None:
    assert find_site_extractor(host) is None


def test_registry_order() -> None:
    assert [extractor.name for extractor in SITE_EXTRACTORS] == [
        "chefkoch",
        "kochbar",
    ]


def test_chefkoch_extracts_title_and_gallery() -> None:
    recipe = ChefkochExtractor().extract(CHEFKOCH_HTML)

    assert recipe.title == "Omas Gulasch"
    assert recipe.images == [
        CHEFKOCH_IMG.format(n=1),
        CHEFKOCH_IMG.format(n=2),
        CHEFKOCH_IMG.format(n=3),
    ]
    # Fields the markup does not provide stay unset
    assert recipe.instructions is None
    assert recipe.ingredients == []
    assert recipe.servings is None


def test_chefkoch_handles_empty_markup() -> None:
    recipe = ChefkochExtractor().extract("")
    assert recipe.title is None
    assert recipe.images == []


def test_kochbar_extracts_ingredients() -> None:
    recipe = KochbarExtractor().extract(KOCHBAR_HTML)

    assert recipe.title == "Käsespätzle"
    assert recipe.ingredients == [
        Ingredient(name="Mehl", amount="500 g"),
        Ingredient(name="Eier", amount="5"),
        Ingredient(name="Bergkäse", amount="200 g"),
        Ingredient(name="Zwiebeln", amount="2"),
    ]


def test_kochbar_extracts_instructions() -> None:
    recipe = KochbarExtractor().extract(KOCHBAR_HTML)
    assert recipe.instructions == (
        "Teig anrühren.\nRuhen lassen.\n\nSpätzle schaben."
    )


def test_kochbar_extracts_images() -> None:
    recipe = KochbarExtractor().extract(KOCHBAR_HTML)
    assert recipe.images == [
        KOCHBAR_IMG.format(size="1200x1200"),
        "https://ais.kochbar.de/kbrezept/123_456/800x800/kaesespaetzle2.jpg",
        KOCHBAR_IMG.format(size="600x600"),
    ]


def test_extract_h1_title() -> None:
    html = "<h1> Apfelkuchen <small>vom Blech</small></h1>"
    assert extract_h1_title(html) == "Apfelkuchen vom Blech"
    assert extract_h1_title("<h2>Kein Titel</h2>") is None


def test_table_ingredients_skip_header_rows() -> None:
    html = (
        "<tr><td>Zutat</td><td>Menge</td></tr>"
        "<tr><td>Zutaten für 4 Personen</td><td>-</td></tr>"
        "<tr><td>Zucker</td><td>100 g</td></tr>"
    )
    assert find_table_ingredients(html) == [Ingredient(name="Zucker", amount="100 g")]


def test_instruction_block_collapses_blank_lines() -> None:
    html = '<section class="zubereitung">Eins.<br><br><br><br>Zwei.</section>'
    assert find_instruction_block(html) == "Eins.\n\nZwei."
    assert find_instruction_block("<div class='other'>x</div>") is None


def test_srcset_uses_first_token_of_each_candidate() -> None:
    html = (
        '<img srcset="https://a.kochbar.de/1.jpg 1x, '
        'https://a.kochbar.de/2.jpg 2x">'
    )
    assert find_srcset_urls(html, lambda url: True) == [
        "https://a.kochbar.de/1.jpg",
        "https://a.kochbar.de/2.jpg",
    ]


def test_unescape_url() -> None:
    assert unescape_url("https:\\/\\/a.de\\/b.jpg") == "https://a.de/b.jpg"
    assert unescape_url("https:\\u002F\\u002Fa.de\\u002Fb.jpg") == "https://a.de/b.jpg"
