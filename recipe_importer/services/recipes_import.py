# recipe_importer/services/recipes_import.py
from __future__ import annotations

import json
import logging
from typing import Any, Optional
from urllib.parse import urlsplit

import httpx

from recipe_importer.core import config
from recipe_importer.core.errors import (
    ConfigurationError,
    FetchError,
    InvalidInputError,
    MalformedResponseError,
)
from recipe_importer.core.text import load_json_payload
from recipe_importer.models.recipe import ImportedRecipe
from recipe_importer.services.html_text import extract_text_from_html
from recipe_importer.services.image_locator import find_main_image
from recipe_importer.services.recipe_normalize import normalize_recipe

log = logging.getLogger("recipe_importer.import")

RECIPE_SCHEMA_HINT = """{
  "name": "Recipe Name",
  "instructions": "Step-by-step cooking instructions as a single string with numbered steps",
  "tags": ["tag1", "tag2"],
  "ingredients": [
    {"name": "ingredient name", "amount": 1.5, "unit": "cups"}
  ],
  "macros": {"carbs": 30, "protein": 25, "fat": 15, "calories": 350},
  "servings": 4,
  "prepTime": 15,
  "cookTime": 30
}"""


def build_extraction_prompt(text: str) -> str:
    return (
        "You are a recipe extraction assistant. Extract the recipe information from the following webpage content.\n\n"
        "Return ONLY a valid JSON object with this structure (no markdown formatting, no code blocks, just the raw JSON):\n"
        f"{RECIPE_SCHEMA_HINT}\n\n"
        "Important rules:\n"
        '1. For ingredients: always use numeric amounts. Convert fractions to decimals ("1/2" -> 0.5) '
        'and mixed numbers to decimals ("1 1/2" -> 1.5). If no amount is given, use 1. '
        'If no unit is given, use "piece" or an appropriate default.\n'
        "2. For macros: estimate reasonable values if not explicitly stated. Use per-serving values in grams.\n"
        "3. For tags: include meal type (breakfast/lunch/dinner), cuisine type, dietary info "
        "(vegetarian, vegan, gluten-free), and cooking style.\n"
        "4. Times should be in minutes.\n"
        "5. Instructions should be clear, numbered steps as a single string.\n"
        "6. If information is not available, use reasonable defaults or null for optional fields.\n"
        "7. IMPORTANT: Return ONLY the JSON object, no other text.\n\n"
        "Webpage content:\n"
        f"{text}"
    )


def validate_url(url: Any) -> str:
    if url is None or (isinstance(url, str) and not url.strip()):
        raise InvalidInputError("URL is required")
    if not isinstance(url, str):
        raise InvalidInputError("Invalid URL format")

    url = url.strip()
    try:
        parts = urlsplit(url)
    except ValueError:
        raise InvalidInputError("Invalid URL format")
    if parts.scheme.lower() not in ("http", "https") or not parts.hostname:
        raise InvalidInputError("Invalid URL format")
    return url


async def fetch_page(url: str, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    log.info("fetching page", extra={"url": url})
    try:
        async with httpx.AsyncClient(
            timeout=config.FETCH_TIMEOUT_S,
            follow_redirects=True,
            transport=transport,
        ) as client:
            r = await client.get(url, headers=config.BROWSER_HEADERS)
    except httpx.HTTPError as e:
        raise FetchError(f"Failed to fetch URL: {e}") from e

    if not r.is_success:
        raise FetchError(f"Failed to fetch URL: HTTP {r.status_code}")

    html = r.text
    log.info("fetched page", extra={"url": url, "html_chars": len(html)})
    return html


def parse_model_output(text: str) -> Any:
    try:
        return load_json_payload(text)
    except json.JSONDecodeError as e:
        log.error("model output is not valid JSON", extra={"raw_text": (text or "")[:1000]})
        raise MalformedResponseError(f"Failed to parse recipe data from AI response: {e}") from e


async def extract_recipe(text: str, html: str, *, model_client: Any) -> ImportedRecipe:
    image_url = find_main_image(html)

    truncated = text[: config.MAX_CONTENT_CHARS]
    prompt = build_extraction_prompt(truncated)

    log.info("calling model", extra={"text_chars": len(truncated)})
    generated = await model_client.generate(prompt)
    log.info("model output received", extra={"preview": generated[:500]})

    return normalize_recipe(parse_model_output(generated), image_url=image_url)


async def import_recipe(
    url: Any,
    *,
    model_client: Any,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ImportedRecipe:
    url = validate_url(url)

    if not getattr(model_client, "configured", False):
        raise ConfigurationError("Gemini API key not configured")

    html = await fetch_page(url, transport=transport)

    text = extract_text_from_html(html)
    log.info("extracted text", extra={"text_chars": len(text)})

    recipe = await extract_recipe(text, html, model_client=model_client)
    log.info("imported recipe", extra={"recipe_name": recipe.name})
    return recipe
