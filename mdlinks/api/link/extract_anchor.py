def extract_anchor(href: str | None) -> str | None:
    """Return the fragment from the first '#' onward, or None."""
    if not href:
        return None
    idx = href.find("#")
    return href[idx:] if idx >= 0 else None
