# recipe_importer/services/health.py
from __future__ import annotations

from typing import Any, Dict, Optional

from recipe_importer.core import config


def _check_result(status: str, error: Optional[str] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {"status": status}
    if error:
        out["error"] = error
    return out


def check_model_config() -> Dict[str, Any]:
    # Imports cannot run without a key; no outbound call is made here
    if not config.GEMINI_API_KEY:
        return _check_result("fail", "GEMINI_API_KEY is not set")
    return _check_result("ok")


def version_payload() -> Dict[str, Any]:
    return {
        "version": config.APP_VERSION,
        "git_sha": config.GIT_SHA,
        "build_date": config.BUILD_DATE,
        "model": config.GEMINI_MODEL,
    }
