"""Page sources for the recipe import pipeline."""

from __future__ import annotations

from kochbuch.importing.sources.url import URLSource

__all__ = ["URLSource"]
