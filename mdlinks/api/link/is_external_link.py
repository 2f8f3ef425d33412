"""External link predicate (UNO: single function)."""

import re

# http:, https:, mailto: and any other scheme://target
EXTERNAL_PATTERN = re.compile(r"^(?:https?:|mailto:|[a-z][a-z0-9+.\-]*://)", re.IGNORECASE)


def is_external_link(href: str | None) -> bool:
    """True for targets no file-system rewrite applies to.

    Anchor-only hrefs count as external: they point into the same document.
    """
    if not href:
        return False
    h = href.strip()
    return bool(EXTERNAL_PATTERN.match(h)) or h.startswith("#")
