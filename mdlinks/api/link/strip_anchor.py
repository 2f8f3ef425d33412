def strip_anchor(href: str | None) -> str:
    """Drop everything from the first '#'."""
    if not href:
        return ""
    return href.split("#", 1)[0]
