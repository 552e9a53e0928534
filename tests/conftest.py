from __future__ import annotations

import json
from typing import List

import pytest

MODEL_PAYLOAD = {
    "name": "Chicken Soup",
    "instructions": "1. Boil. 2. Serve.",
    "tags": ["dinner"],
    "ingredients": [{"name": "Chicken", "amount": 1, "unit": "lb"}],
    "macros": {"carbs": 5, "protein": 30, "fat": 10},
    "servings": 4,
    "prepTime": 10,
    "cookTime": 40,
}

RECIPE_PAGE = """<!doctype html>
<html>
<head>
  <title>Chicken Soup</title>
  <meta property="og:image" content="https://example.com/img.jpg">
  <style>body { font-family: serif; }</style>
</head>
<body>
  <h1>Chicken Soup</h1>
  <img src="https://example.com/logo.png">
  <img src="https://example.com/other.jpg">
  <ul><li>1 lb chicken</li></ul>
  <p>Boil. Serve.</p>
</body>
</html>
"""


class FakeModelClient:
    configured = True

    def __init__(self, reply: str):
        self.reply = reply
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.reply


@pytest.fixture
def model_client() -> FakeModelClient:
    return FakeModelClient(json.dumps(MODEL_PAYLOAD))
