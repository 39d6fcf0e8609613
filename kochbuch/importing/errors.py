"""Exceptions raised by the recipe import pipeline."""

from __future__ import annotations


class RecipeImportError(Exception):
    """Base class for errors that abort a recipe import."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Error message
            url: The URL being imported, if known
        """
        super().__init__(message)
        self.url = url


class InvalidUrlError(RecipeImportError):
    """The input is not an absolute http(s) URL."""


class FetchError(RecipeImportError):
    """The recipe page could not be retrieved."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: Error message
            url: The page URL
            status_code: Upstream HTTP status, when the server answered
        """
        super().__init__(message, url=url)
        self.status_code = status_code

    @property
    def reason(self) -> str:
        """Short reason suitable for user-facing messages."""
        if self.status_code is not None:
            return str(self.status_code)
        return str(self)


class NoRecipeFoundError(RecipeImportError):
    """The page was fetched but no extractor produced a usable recipe."""


__all__ = [
    "FetchError",
    "InvalidUrlError",
    "NoRecipeFoundError",
    "RecipeImportError",
]
