# recipe_importer/services/recipe_normalize.py
from __future__ import annotations

import math
import re
from typing import Any, List, Optional

from recipe_importer.core.errors import MalformedResponseError
from recipe_importer.models.recipe import (
    DEFAULT_RECIPE_NAME,
    DEFAULT_UNIT,
    ImportedRecipe,
    Ingredient,
    Macros,
)

UNICODE_FRACTIONS = {
    "½": 0.5,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 0.25,
    "¾": 0.75,
    "⅕": 0.2,
    "⅖": 0.4,
    "⅗": 0.6,
    "⅘": 0.8,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅛": 0.125,
    "⅜": 0.375,
    "⅝": 0.625,
    "⅞": 0.875,
}

_MIXED = re.compile(r"^(\d+)\s+(\d+)\s*/\s*(\d+)")
_FRACTION = re.compile(r"^(\d+)\s*/\s*(\d+)")
_WHOLE_AND_GLYPH = re.compile(r"^(\d*)\s*([" + "".join(UNICODE_FRACTIONS) + r"])")
_LEADING_NUMBER = re.compile(r"^-?(?:\d+(?:\.\d+)?|\.\d+)")
_ISO_DURATION = re.compile(r"^P(?:T(?:(\d+)H)?(?:(\d+)M)?(?:\d+S)?)$", flags=re.I)


def _is_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range
        return False


def parse_amount(value: Any) -> float:
    """
    Coerce an ingredient amount to a number.

    Accepts numbers, decimal strings, simple ("1/2") and mixed ("1 1/2")
    fractions and unicode vulgar fractions ("1½"). Anything else is 1.
    """
    if _is_number(value):
        return float(value)
    if not isinstance(value, str):
        return 1.0

    try:
        n = _amount_from_text(value)
    except (OverflowError, ValueError):
        return 1.0
    return n if n is not None and math.isfinite(n) else 1.0


def _amount_from_text(value: str) -> Optional[float]:
    s = value.strip().replace(",", ".")

    m = _MIXED.match(s)
    if m and int(m.group(3)):
        return int(m.group(1)) + int(m.group(2)) / int(m.group(3))

    m = _FRACTION.match(s)
    if m and int(m.group(2)):
        return int(m.group(1)) / int(m.group(2))

    m = _WHOLE_AND_GLYPH.match(s)
    if m:
        return int(m.group(1) or 0) + UNICODE_FRACTIONS[m.group(2)]

    m = _LEADING_NUMBER.match(s)
    if m:
        return float(m.group(0))
    return None


def _number(value: Any) -> Optional[float]:
    if _is_number(value):
        return float(value)
    if isinstance(value, str):
        m = _LEADING_NUMBER.match(value.strip())
        if m and math.isfinite(float(m.group(0))):
            return float(m.group(0))
    return None


def _positive_number(value: Any) -> Optional[float]:
    n = _number(value)
    return n if n is not None and n > 0 else None


def _positive_int(value: Any) -> Optional[int]:
    n = _positive_number(value)
    return int(round(n)) if n is not None else None


def _minutes(value: Any) -> Optional[int]:
    # Models sometimes echo schema.org durations ("PT1H15M")
    if isinstance(value, str):
        m = _ISO_DURATION.match(value.strip())
        if m and (m.group(1) or m.group(2)):
            try:
                total = int(m.group(1) or 0) * 60 + int(m.group(2) or 0)
            except ValueError:
                return None
            return total or None
    return _positive_int(value)


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if _is_number(value):
        return str(value)
    return ""


def _text_or(value: Any, default: str) -> str:
    text = _text(value)
    return text if text.strip() else default


def _instructions(value: Any) -> str:
    if isinstance(value, list):
        steps = []
        for step in value:
            if isinstance(step, dict):
                step = step.get("text") or step.get("description")
            step = _text(step).strip()
            if step:
                steps.append(step)
        return "\n".join(f"{i}. {s}" for i, s in enumerate(steps, start=1))
    return _text(value)


def _tags(value: Any) -> List[str]:
    if isinstance(value, str):
        return [t.strip() for t in value.split(",") if t.strip()]
    if not isinstance(value, list):
        return []
    return [_text(t) for t in value if isinstance(t, str) or _is_number(t)]


def _ingredient(value: Any) -> Optional[Ingredient]:
    if isinstance(value, str):
        return Ingredient(name=value.strip()) if value.strip() else None
    if not isinstance(value, dict):
        return None
    return Ingredient(
        name=_text(value.get("name")),
        amount=parse_amount(value.get("amount")),
        unit=_text_or(value.get("unit"), DEFAULT_UNIT),
    )


def _ingredients(value: Any) -> List[Ingredient]:
    if not isinstance(value, list):
        return []
    out = []
    for item in value:
        ing = _ingredient(item)
        if ing is not None:
            out.append(ing)
    return out


def _macros(value: Any) -> Macros:
    if not isinstance(value, dict):
        return Macros()
    return Macros(
        carbs=_number(value.get("carbs")) or 0,
        protein=_number(value.get("protein")) or 0,
        fat=_number(value.get("fat")) or 0,
        calories=_positive_number(value.get("calories")),
    )


def normalize_recipe(raw: Any, image_url: Optional[str] = None) -> ImportedRecipe:
    """
    Coerce an untyped model payload into an ``ImportedRecipe``.

    Every field is filled with a safe default; ``image_url`` always replaces
    whatever image the model may have reported. Strings are kept verbatim,
    so a payload that already matches the schema comes back unchanged.
    """
    if not isinstance(raw, dict):
        raise MalformedResponseError("Failed to parse recipe data from AI response: expected a JSON object")

    return ImportedRecipe(
        name=_text_or(raw.get("name"), DEFAULT_RECIPE_NAME),
        instructions=_instructions(raw.get("instructions")),
        image_url=image_url or None,
        tags=_tags(raw.get("tags")),
        ingredients=_ingredients(raw.get("ingredients")),
        macros=_macros(raw.get("macros")),
        servings=_positive_int(raw.get("servings")),
        prep_time=_minutes(raw.get("prepTime")),
        cook_time=_minutes(raw.get("cookTime")),
    )
