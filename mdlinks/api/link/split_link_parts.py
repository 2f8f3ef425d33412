"""Split an href into path, query and anchor (UNO: single function)."""

from .LinkParts import LinkParts


def split_link_parts(href: str | None) -> LinkParts:
    """Separate path, query (leading '?') and anchor (leading '#').

    A '?' after the first '#' belongs to the anchor, not the query.

    Examples:
        >>> split_link_parts("a/b.md?x=1#top")
        LinkParts(path='a/b.md', query='?x=1', anchor='#top')
        >>> split_link_parts("b.md#sec?not-a-query")
        LinkParts(path='b.md', query='', anchor='#sec?not-a-query')
    """
    if not href:
        return LinkParts("", "", "")
    hash_idx = href.find("#")
    q_idx = href.find("?")

    path_end = len(href)
    if hash_idx >= 0:
        path_end = min(path_end, hash_idx)
    if q_idx >= 0:
        path_end = min(path_end, q_idx)

    query = ""
    if q_idx >= 0 and (hash_idx < 0 or q_idx < hash_idx):
        query = href[q_idx:hash_idx] if hash_idx >= 0 else href[q_idx:]
    anchor = href[hash_idx:] if hash_idx >= 0 else ""
    return LinkParts(href[:path_end], query, anchor)
