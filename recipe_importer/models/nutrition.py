# recipe_importer/models/nutrition.py
from __future__ import annotations

from pydantic import BaseModel, Field

from recipe_importer.models.recipe import Macros


class MacroBreakdown(BaseModel):
    carbs_pct: float = Field(default=0, alias="carbsPercent")
    protein_pct: float = Field(default=0, alias="proteinPercent")
    fat_pct: float = Field(default=0, alias="fatPercent")

    model_config = {"populate_by_name": True}


class NutritionSummaryRequest(BaseModel):
    macros: Macros
    portions: float = Field(default=1, gt=0)


class NutritionSummary(BaseModel):
    calories: int
    macros: Macros
    breakdown: MacroBreakdown
