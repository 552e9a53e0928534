# recipe_importer/routers/recipes_import.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from recipe_importer.clients.gemini import GeminiClient, get_model_client
from recipe_importer.core import config
from recipe_importer.core.auth import verify_token
from recipe_importer.models.recipe import ErrorResponse, ImportRecipeRequest, ImportRecipeResponse
from recipe_importer.services.recipes_import import import_recipe

router = APIRouter(tags=["recipe"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": ", ".join(config.CORS_ALLOW_HEADERS),
}


@router.options("/import-recipe")
def import_recipe_preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post(
    "/import-recipe",
    response_model=ImportRecipeResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    dependencies=[Depends(verify_token)],
)
async def import_recipe_endpoint(
    req: ImportRecipeRequest,
    model_client: GeminiClient = Depends(get_model_client),
) -> ImportRecipeResponse:
    recipe = await import_recipe(req.url, model_client=model_client)
    return ImportRecipeResponse(recipe=recipe)
