# recipe_importer/core/request_context.py
from __future__ import annotations

import contextvars

request_id_ctx = contextvars.ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    return request_id_ctx.get()


def set_request_id(value: str | None) -> contextvars.Token:
    return request_id_ctx.set(value)


def reset_request_id(token: contextvars.Token) -> None:
    request_id_ctx.reset(token)
