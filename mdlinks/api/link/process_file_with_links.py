"""Extract, generate and apply in one pass over in-memory content (UNO: single function)."""

from collections.abc import Callable

from .apply_replacements import apply_replacements
from .ApplyResult import ApplyResult
from .extract_links import extract_links
from .ParsedLink import ParsedLink
from .Replacement import Replacement


def process_file_with_links(
    content: str,
    generate: Callable[[list[ParsedLink]], list[Replacement]],
) -> ApplyResult:
    return apply_replacements(content, generate(extract_links(content)))
