from __future__ import annotations

import json
from typing import Any

import pytest

from kochbuch.importing import RecipeImporter
from kochbuch.main import app
from kochbuch.routes.imports import get_recipe_importer

PAGE_URL = "https://www.example.com/rezepte/linsensuppe"


def _recipe_page(**fields: Any) -> str:
    payload = {"@context": "https://schema.org", "@type": "Recipe", **fields}
    return (
        '<html><head><script type="application/ld+json">'
        f"{json.dumps(payload)}"
        "</script></head><body></body></html>"
    )


@pytest.mark.asyncio
async def test_import_returns_recipe(test_client: Any, fake_web: Any) -> None:
    """A successful import returns the recipe in camelCase JSON."""
    fake_web.add_page(
        PAGE_URL,
        _recipe_page(
            name="Linsensuppe von oma",
            recipeIngredient=["250 g Linsen", "1 Karotte"],
            prepTime="PT15M",
            cookTime="PT45M",
            image="https://img.example.com/linsen.jpg",
        ),
    )
    fake_web.add_image("https://img.example.com/linsen.jpg", content_type="image/png")

    response = await test_client.post("/api/import", json={"url": PAGE_URL})

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Linsensuppe"
    assert body["ingredients"] == [
        {"name": "Linsen", "amount": "250 g"},
        {"name": "Karotte", "amount": "1"},
    ]
    assert body["totalTime"] == 60
    assert body["servings"] == 4
    assert body["weightUnit"] == "100g"
    assert body["sourceUrl"] == PAGE_URL
    assert len(body["images"]) == 1
    assert body["images"][0].startswith("data:image/png;base64,")


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"url": ""}, {"url": "   "}])
async def test_missing_url(test_client: Any, payload: dict[str, str]) -> None:
    response = await test_client.post("/api/import", json=payload)
    assert response.status_code == 400
    assert response.json() == {"detail": "URL ist erforderlich"}


@pytest.mark.asyncio
async def test_invalid_url(test_client: Any, fake_web: Any) -> None:
    response = await test_client.post("/api/import", json={"url": "kein-link"})
    assert response.status_code == 400
    assert response.json() == {"detail": "Ungültige URL"}
    assert fake_web.requests == []


@pytest.mark.asyncio
async def test_upstream_failure(test_client: Any, fake_web: Any) -> None:
    fake_web.add_page(PAGE_URL, "gone", status_code=404)

    response = await test_client.post("/api/import", json={"url": PAGE_URL})

    assert response.status_code == 400
    assert response.json() == {"detail": "Konnte Seite nicht laden: 404"}


@pytest.mark.asyncio
async def test_no_recipe_found(test_client: Any, fake_web: Any) -> None:
    fake_web.add_page(PAGE_URL, "<html><body><h1>Blog</h1></body></html>")

    response = await test_client.post("/api/import", json={"url": PAGE_URL})

    assert response.status_code == 400
    assert response.json() == {
        "detail": "Konnte kein Rezept auf dieser Seite finden"
    }


class _ExplodingImporter(RecipeImporter):
    async def import_from_url(self, url: str) -> Any:
        raise RuntimeError("database password is hunter2")


@pytest.mark.asyncio
async def test_internal_error_is_generic(test_client: Any) -> None:
    app.dependency_overrides[get_recipe_importer] = lambda: _ExplodingImporter()

    response = await test_client.post("/api/import", json={"url": PAGE_URL})

    assert response.status_code == 500
    assert response.json() == {"detail": "Fehler beim Importieren des Rezepts"}
    assert "hunter2" not in response.text
