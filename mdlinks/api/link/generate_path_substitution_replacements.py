"""Path substitution replacement generator (UNO: single function)."""

from collections.abc import Iterable

from .normalize_link_slashes import normalize_link_slashes
from .ParsedLink import ParsedLink
from .Replacement import Replacement
from .ReplacementKind import PATH_SUBSTITUTION
from .should_skip_link import should_skip_link


def generate_path_substitution_replacements(
    links: list[ParsedLink],
    old_base: str,
    new_base: str,
    exclusion_list: Iterable[str] = (),
) -> list[Replacement]:
    """Swap the old_base prefix of every local link for new_base.

    Purely textual: nothing is checked against the file system.
    """
    exclusions = tuple(exclusion_list)
    replacements: list[Replacement] = []
    for link in links:
        if should_skip_link(link.href, exclusions):
            continue
        norm = normalize_link_slashes(link.href)
        if norm.startswith(old_base):
            replacements.append(
                Replacement(
                    start=link.start,
                    end=link.end,
                    line=link.line,
                    old_href=link.href,
                    new_href=new_base + norm[len(old_base) :],
                    kind=PATH_SUBSTITUTION,
                )
            )
    return replacements
