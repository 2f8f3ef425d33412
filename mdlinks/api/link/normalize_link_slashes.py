def normalize_link_slashes(href: str) -> str:
    """Convert Windows separators in an href to '/'."""
    return href.replace("\\", "/")
