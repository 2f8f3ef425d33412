"""LinkParts model (UNO: single model)."""

from typing import NamedTuple


class LinkParts(NamedTuple):
    """An href split into filesystem path, query (with '?') and anchor (with '#')."""

    path: str
    query: str
    anchor: str
