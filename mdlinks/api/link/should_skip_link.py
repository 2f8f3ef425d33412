"""Shared skip predicate for replacement generators (UNO: single function)."""

import re
from collections.abc import Iterable

from .is_external_link import is_external_link

# Internal placeholder marker, never a real target
PLACEHOLDER_PATTERN = re.compile(r"^:.*\.md:$")


def should_skip_link(href: str | None, exclusion_list: Iterable[str] = ()) -> bool:
    """True when no generator may rewrite href.

    Empty, external, excluded by prefix, or a ``:name.md:`` placeholder.
    """
    if not href:
        return True
    return (
        is_external_link(href)
        or any(href.startswith(excluded) for excluded in exclusion_list)
        or bool(PLACEHOLDER_PATTERN.match(href))
    )
