from kochbuch.importing.merge import merge_site_data
from kochbuch.importing.models import ExtractedRecipe, Ingredient


def _structured(**overrides: object) -> ExtractedRecipe:
    fields: dict[str, object] = {
        "title": "Gulasch",
        "images": ["https://img.example.com/a.jpg"],
        "ingredients": [Ingredient(name="Rindfleisch", amount="1 kg")],
        "instructions": "1. Anbraten.",
        "prep_time": 20,
        "cook_time": 90,
        "servings": 6,
    }
    fields.update(overrides)
    return ExtractedRecipe(**fields)


def _site(**overrides: object) -> ExtractedRecipe:
    fields: dict[str, object] = {
        "title": "Gulasch (Seite)",
        "images": [
            "https://img.example.com/a.jpg",
            "https://img.example.com/b.jpg",
        ],
        "ingredients": [Ingredient(name="Zwiebeln", amount="3")],
        "instructions": "Alles schmoren.",
    }
    fields.update(overrides)
    return ExtractedRecipe(**fields)


def test_both_missing() -> None:
    assert merge_site_data(None, None) is None


def test_without_site_data_structured_is_returned() -> None:
    structured = _structured()
    assert merge_site_data(structured, None) is structured


def test_without_structured_data_site_data_is_used() -> None:
    site = _site(images=["https://img.example.com/b.jpg"] * 2)
    merged = merge_site_data(None, site)
    assert merged is not None
    assert merged.title == "Gulasch (Seite)"
    assert merged.images == ["https://img.example.com/b.jpg"]
    assert merged.servings is None


def test_structured_wins_except_images() -> None:
    merged = merge_site_data(_structured(), _site())
    assert merged is not None
    assert merged.title == "Gulasch"
    assert merged.instructions == "1. Anbraten."
    assert merged.ingredients == [Ingredient(name="Rindfleisch", amount="1 kg")]
    assert merged.servings == 6
    assert merged.prep_time == 20
    assert merged.images == [
        "https://img.example.com/a.jpg",
        "https://img.example.com/b.jpg",
    ]


def test_empty_structured_fields_fall_back_to_site_data() -> None:
    merged = merge_site_data(
        _structured(title="", instructions="", ingredients=[]), _site()
    )
    assert merged is not None
    assert merged.title == "Gulasch (Seite)"
    assert merged.instructions == "Alles schmoren."
    assert merged.ingredients == [Ingredient(name="Zwiebeln", amount="3")]
    # Other fields stay with the structured data
    assert merged.cook_time == 90


def test_empty_structured_title_survives_missing_site_title() -> None:
    merged = merge_site_data(_structured(title=""), _site(title=None))
    assert merged is not None
    assert merged.title == ""


def test_merge_does_not_mutate_inputs() -> None:
    structured = _structured()
    site = _site()
    merge_site_data(structured, site)
    assert structured.images == ["https://img.example.com/a.jpg"]
    assert len(site.images) == 2


def test_merging_same_site_data_again_changes_nothing() -> None:
    once = merge_site_data(_structured(), _site())
    twice = merge_site_data(once, _site())
    assert twice == once
    assert twice is not None
    assert twice.images == [
        "https://img.example.com/a.jpg",
        "https://img.example.com/b.jpg",
    ]
