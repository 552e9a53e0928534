# recipe_importer/services/html_text.py
from __future__ import annotations

import html as _html
import re

_DROP_ELEMENTS = re.compile(r"<(script|style|noscript)\b[^>]*>.*?</\1\s*>", flags=re.I | re.S)
_COMMENTS = re.compile(r"<!--.*?-->", flags=re.S)
_BLOCK_BOUNDARY = re.compile(
    r"<br\s*/?>|</(?:p|div|h[1-6]|li|tr|br|section|article|ul|ol|table|header|footer|blockquote)\s*>",
    flags=re.I,
)
_TAG = re.compile(r"<[^>]+>")
# Only things that look like markup; keeps text such as "3 < 5"
_TAG_LIKE = re.compile(r"<[a-zA-Z/!][^>]*>")


def extract_text_from_html(html: str) -> str:
    """
    Reduce a page to plain text for the model prompt.

    Script/style/noscript bodies and comments are dropped, block boundaries
    become newlines, every other tag becomes a space, entities are decoded,
    and whitespace is collapsed to at most one blank line between paragraphs.
    """
    if not html:
        return ""

    text = _DROP_ELEMENTS.sub("", html)
    # Unterminated script/style blocks run to the end of the document
    text = re.sub(r"<(script|style|noscript)\b.*", "", text, flags=re.I | re.S)
    text = _COMMENTS.sub("", text)
    text = re.sub(r"<!--.*", "", text, flags=re.S)

    text = _BLOCK_BOUNDARY.sub("\n", text)
    text = _TAG.sub(" ", text)

    text = _html.unescape(text).replace("\xa0", " ")
    text = _TAG_LIKE.sub(" ", text)

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = re.sub(r"[ \t\f\v]+", " ", text)
    text = re.sub(r" *\n *", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()
