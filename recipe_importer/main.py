import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from recipe_importer.core import config
from recipe_importer.core.errors import RecipeImportError
from recipe_importer.core.logging import setup_logging
from recipe_importer.core.middleware import RequestLoggingMiddleware
from recipe_importer.routers import health, nutrition, recipes_import

log = logging.getLogger("recipe_importer.errors")


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers={"Access-Control-Allow-Origin": "*"},
    )


async def recipe_import_error_handler(request: Request, exc: RecipeImportError) -> JSONResponse:
    log.error("import failed", extra={"error_type": type(exc).__name__, "error": exc.message})
    return _error(exc.message, exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception("unhandled error", extra={"error_type": type(exc).__name__})
    return _error(str(exc) or "Unknown error occurred", 500)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(str(exc.detail), exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if not errors or any(e.get("type") == "json_invalid" for e in errors):
        return _error("Invalid JSON in request body", 400)
    first = errors[0]
    where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    return _error(f"Invalid request: {where or 'body'}: {first.get('msg', 'invalid value')}", 400)


def create_app() -> FastAPI:
    app = FastAPI(title="Recipe Importer", version=config.APP_VERSION)
    app.include_router(recipes_import.router)
    app.include_router(nutrition.router)
    app.include_router(health.router)

    app.add_exception_handler(RecipeImportError, recipe_import_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    setup_logging()

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=config.CORS_ALLOW_HEADERS,
    )

    return app

app = create_app()
