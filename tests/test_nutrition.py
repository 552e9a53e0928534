from __future__ import annotations

import pytest

from recipe_importer.models.recipe import Ingredient, Macros
from recipe_importer.services import nutrition


def test_calculate_calories_uses_4_4_9():
    assert nutrition.calculate_calories(Macros(carbs=5, protein=30, fat=10)) == 230


def test_resolve_calories_prefers_stored_value():
    assert nutrition.resolve_calories(Macros(carbs=5, protein=30, fat=10, calories=250)) == 250
    assert nutrition.resolve_calories(Macros(carbs=5, protein=30, fat=10)) == 230


def test_macro_breakdown_percentages_from_grams():
    breakdown = nutrition.macro_breakdown(Macros(carbs=5, protein=30, fat=10, calories=999))

    assert breakdown.carbs_pct == pytest.approx(8.7)
    assert breakdown.protein_pct == pytest.approx(52.2)
    assert breakdown.fat_pct == pytest.approx(39.1)


def test_macro_breakdown_without_energy_is_zero():
    breakdown = nutrition.macro_breakdown(Macros())

    assert (breakdown.carbs_pct, breakdown.protein_pct, breakdown.fat_pct) == (0, 0, 0)


def test_scale_macros_scales_every_value():
    scaled = nutrition.scale_macros(Macros(carbs=5, protein=30, fat=10, calories=230), 2)

    assert scaled.model_dump() == {"carbs": 10, "protein": 60, "fat": 20, "calories": 460}


def test_scale_ingredients_to_target_servings():
    ingredients = [Ingredient(name="Chicken", amount=1, unit="lb"), Ingredient(name="Salt", amount=0.5, unit="tsp")]

    scaled = nutrition.scale_ingredients(ingredients, servings=4, target_servings=2)

    assert [(i.name, i.amount, i.unit) for i in scaled] == [("Chicken", 0.5, "lb"), ("Salt", 0.25, "tsp")]
    assert ingredients[0].amount == 1


@pytest.mark.parametrize("servings, target", [(0, 2), (4, 0), (-1, 2)])
def test_scale_ingredients_rejects_non_positive_servings(servings, target):
    with pytest.raises(ValueError):
        nutrition.scale_ingredients([], servings=servings, target_servings=target)


def test_summarize_scales_then_resolves():
    summary = nutrition.summarize(Macros(carbs=5, protein=30, fat=10), portions=2)

    assert summary.calories == 460
    assert summary.macros.protein == 60
    assert summary.breakdown.protein_pct == pytest.approx(52.2)
