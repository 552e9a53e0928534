# recipe_importer/services/nutrition.py
from __future__ import annotations

from typing import List

from recipe_importer.models.nutrition import MacroBreakdown, NutritionSummary
from recipe_importer.models.recipe import Ingredient, Macros

# kcal per gram
CARB_KCAL = 4
PROTEIN_KCAL = 4
FAT_KCAL = 9


def _energy(macros: Macros) -> float:
    return macros.carbs * CARB_KCAL + macros.protein * PROTEIN_KCAL + macros.fat * FAT_KCAL


def calculate_calories(macros: Macros) -> int:
    return int(round(_energy(macros)))


def resolve_calories(macros: Macros) -> int:
    """Stored calories win; otherwise derive them from the macro grams."""
    if macros.calories is not None:
        return int(round(macros.calories))
    return calculate_calories(macros)


def macro_breakdown(macros: Macros) -> MacroBreakdown:
    # Percentages always come from grams so the three shares add up to 100
    total = _energy(macros)
    if total <= 0:
        return MacroBreakdown()
    return MacroBreakdown(
        carbs_pct=round(macros.carbs * CARB_KCAL / total * 100, 1),
        protein_pct=round(macros.protein * PROTEIN_KCAL / total * 100, 1),
        fat_pct=round(macros.fat * FAT_KCAL / total * 100, 1),
    )


def scale_macros(macros: Macros, factor: float) -> Macros:
    if factor <= 0:
        raise ValueError("factor must be positive")
    return Macros(
        carbs=macros.carbs * factor,
        protein=macros.protein * factor,
        fat=macros.fat * factor,
        calories=macros.calories * factor if macros.calories is not None else None,
    )


def scale_ingredients(ingredients: List[Ingredient], servings: int, target_servings: int) -> List[Ingredient]:
    if servings <= 0 or target_servings <= 0:
        raise ValueError("servings must be positive")
    factor = target_servings / servings
    return [ing.model_copy(update={"amount": ing.amount * factor}) for ing in ingredients]


def summarize(macros: Macros, portions: float = 1) -> NutritionSummary:
    scaled = scale_macros(macros, portions)
    return NutritionSummary(
        calories=resolve_calories(scaled),
        macros=scaled,
        breakdown=macro_breakdown(scaled),
    )
