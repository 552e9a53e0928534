import json
import re
from typing import Any

_FENCE_OPEN = re.compile(r"^```(?:json)?", flags=re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    text = (text or "").strip()
    text = _FENCE_OPEN.sub("", text, count=1)
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def load_json_payload(text: str) -> Any:
    """Parse model output that may be wrapped in a markdown code fence."""
    return json.loads(strip_code_fences(text))
