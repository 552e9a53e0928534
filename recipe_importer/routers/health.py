# recipe_importer/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Response, status

from recipe_importer.services.health import check_model_config, version_payload

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    # Liveness only: if the process is serving requests, it's up
    return {"status": "ok", **version_payload()}


@router.get("/health/ready")
def ready(response: Response):
    model = check_model_config()

    overall = "ok"
    http_status = status.HTTP_200_OK
    if model["status"] != "ok":
        overall = "fail"
        http_status = status.HTTP_503_SERVICE_UNAVAILABLE

    response.status_code = http_status
    return {
        "status": overall,
        "checks": {"model": model},
        **version_payload(),
    }


@router.get("/version")
def version():
    return version_payload()
