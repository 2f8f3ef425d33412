"""Link type classification (UNO: single function)."""

import re
from typing import Literal

HTTP_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
MAILTO_PATTERN = re.compile(r"^mailto:", re.IGNORECASE)

LinkType = Literal["relative", "absolute", "http", "mailto", "anchor", "other"]


def classify_link_type(href: str | None) -> LinkType:
    """Classify an href; the first matching rule wins."""
    if not href:
        return "other"
    h = href.strip()
    if h.startswith("#"):
        return "anchor"
    if HTTP_PATTERN.match(h):
        return "http"
    if MAILTO_PATTERN.match(h):
        return "mailto"
    if h.startswith("/"):
        return "absolute"
    return "relative"
