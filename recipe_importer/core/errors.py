# recipe_importer/core/errors.py
from __future__ import annotations


class RecipeImportError(Exception):
    """Base class for failures surfaced to the caller as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(RecipeImportError):
    """Missing or malformed URL. Reported before any network call."""

    status_code = 400


class FetchError(RecipeImportError):
    """The target page was unreachable or answered with a non-2xx status."""


class UpstreamError(RecipeImportError):
    """The text-generation API failed, refused, or returned no text."""


class MalformedResponseError(RecipeImportError):
    """The model answered with something that is not a JSON recipe object."""


class ConfigurationError(RecipeImportError):
    """A required server-side setting (e.g. the model API key) is missing."""
