# recipe_importer/services/image_locator.py
from __future__ import annotations

import html as _html
import re
from typing import Optional

IMAGE_DENYLIST = ("icon", "logo", "avatar", "1x1", "tracking")

_OG_IMAGE_PATTERNS = (
    re.compile(r'<meta[^>]*property=["\']og:image["\'][^>]*content=["\']([^"\']+)["\']', flags=re.I),
    re.compile(r'<meta[^>]*content=["\']([^"\']+)["\'][^>]*property=["\']og:image["\']', flags=re.I),
)
_SCHEMA_IMAGE = re.compile(r'"image"\s*:\s*"([^"]+)"')
_IMG_SRC = re.compile(r'<img[^>]*src=["\']([^"\']+)["\'][^>]*>', flags=re.I)


def _og_image(html: str) -> Optional[str]:
    for pattern in _OG_IMAGE_PATTERNS:
        m = pattern.search(html)
        if m and m.group(1).strip():
            return _html.unescape(m.group(1).strip())
    return None


def _schema_image(html: str) -> Optional[str]:
    m = _SCHEMA_IMAGE.search(html)
    if m and m.group(1).startswith("http"):
        return m.group(1)
    return None


def _content_image(html: str) -> Optional[str]:
    for m in _IMG_SRC.finditer(html):
        src = m.group(1)
        lowered = src.lower()
        if src.startswith("http") and not any(bad in lowered for bad in IMAGE_DENYLIST):
            return _html.unescape(src)
    return None


def find_main_image(html: str) -> Optional[str]:
    """Pick one representative image: og:image, then JSON "image", then the first content <img>."""
    if not html:
        return None
    return _og_image(html) or _schema_image(html) or _content_image(html)
