from __future__ import annotations

import json

import pytest

from recipe_importer.core.text import load_json_payload, strip_code_fences


@pytest.mark.parametrize(
    "raw",
    [
        '```json\n{"name": "Soup"}\n```',
        '```JSON {"name": "Soup"}```',
        '```\n{"name": "Soup"}\n```',
        '  {"name": "Soup"}  ',
    ],
)
def test_fenced_and_bare_json_parse(raw: str):
    assert load_json_payload(raw) == {"name": "Soup"}


def test_strip_code_fences_leaves_inner_text():
    assert strip_code_fences('```json\n[1, 2]\n```') == "[1, 2]"


def test_non_json_raises_decode_error():
    with pytest.raises(json.JSONDecodeError):
        load_json_payload("Sorry, I could not find a recipe.")
