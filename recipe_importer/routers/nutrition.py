# recipe_importer/routers/nutrition.py
from __future__ import annotations

from fastapi import APIRouter

from recipe_importer.models.nutrition import NutritionSummary, NutritionSummaryRequest
from recipe_importer.services.nutrition import summarize

router = APIRouter(prefix="/nutrition", tags=["nutrition"])


@router.post("/summary", response_model=NutritionSummary, response_model_exclude_none=True)
def nutrition_summary(req: NutritionSummaryRequest) -> NutritionSummary:
    return summarize(req.macros, req.portions)
