"""Recipe import endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from kochbuch.importing import (
    FetchError,
    InvalidUrlError,
    NoRecipeFoundError,
    RecipeImporter,
)

router = APIRouter(prefix="/api/import", tags=["import"])

logger = logging.getLogger("kochbuch.imports")


class ImportRequest(BaseModel):
    """Body of an import request."""

    url: str | None = None


def get_recipe_importer() -> RecipeImporter:
    """Provide the importer used by the endpoint."""
    return RecipeImporter()


@router.post("")
async def import_recipe(
    payload: ImportRequest,
    importer: RecipeImporter = Depends(get_recipe_importer),
) -> JSONResponse:
    """Import a recipe from a web page and return it as JSON."""
    url = (payload.url or "").strip()
    if not url:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="URL ist erforderlich",
        )

    try:
        recipe = await importer.import_from_url(url)
    except InvalidUrlError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Ungültige URL",
        ) from exc
    except FetchError as exc:
        logger.info("Fetching %s failed: %s", url, exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Konnte Seite nicht laden: {exc.reason}",
        ) from exc
    except NoRecipeFoundError as exc:
        logger.info("No recipe found at %s", url)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Konnte kein Rezept auf dieser Seite finden",
        ) from exc
    except Exception as exc:
        logger.exception("Recipe import failed for %s", url)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Fehler beim Importieren des Rezepts",
        ) from exc

    return JSONResponse(recipe.to_dict())
