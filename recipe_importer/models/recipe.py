# recipe_importer/models/recipe.py
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field

DEFAULT_RECIPE_NAME = "Imported Recipe"
DEFAULT_UNIT = "piece"


class ImportRecipeRequest(BaseModel):
    # Validated by the pipeline so missing/blank URLs map to InvalidInputError
    url: Optional[Any] = None


class Ingredient(BaseModel):
    name: str = ""
    amount: float = 1
    unit: str = DEFAULT_UNIT


class Macros(BaseModel):
    carbs: float = 0
    protein: float = 0
    fat: float = 0
    calories: Optional[float] = None


class ImportedRecipe(BaseModel):
    name: str = DEFAULT_RECIPE_NAME
    instructions: str = ""
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    tags: List[str] = Field(default_factory=list)
    ingredients: List[Ingredient] = Field(default_factory=list)
    macros: Macros = Field(default_factory=Macros)
    servings: Optional[int] = None
    prep_time: Optional[int] = Field(default=None, alias="prepTime")
    cook_time: Optional[int] = Field(default=None, alias="cookTime")

    model_config = {"populate_by_name": True}


class ImportRecipeResponse(BaseModel):
    recipe: ImportedRecipe


class ErrorResponse(BaseModel):
    error: str
