"""Replacement applier."""

from ...utils.get_logger import get_logger
from .ApplyResult import ApplyResult
from .Replacement import Replacement
from .replace_link_on_line import replace_link_on_line

logger = get_logger("link")

# How far (in characters) around stale offsets old_href is searched for
OFFSET_FALLBACK_WINDOW = 64


def _splice(content: str, pos: int, old_href: str, new_href: str) -> str:
    return content[:pos] + new_href + content[pos + len(old_href) :]


def _apply_offset(content: str, r: Replacement, window: int) -> str | None:
    """Apply one offset-based replacement; None when it does not apply."""
    start, end = r.start, r.end
    assert start is not None and end is not None
    if start < 0 or end > len(content) or start >= end:
        return None
    if content[start:end] == r.old_href:
        return content[:start] + r.new_href + content[end:]

    found = content.find(r.old_href, max(0, start - window))
    if found == -1:
        return None
    if found < start or found <= end + window:
        return _splice(content, found, r.old_href, r.new_href)
    return None


def apply_replacements(
    content: str,
    replacements: list[Replacement],
    window: int | None = None,
) -> ApplyResult:
    """Apply replacements computed against content, returning the new content and counts.

    Offset-based replacements go first, right to left by start, so earlier
    offsets stay valid. When the exact slice no longer holds old_href the text is
    searched for within ``window`` characters (OFFSET_FALLBACK_WINDOW by default).
    Line-based replacements follow, each touching only its own line. Anything
    that cannot be located is silently not applied.

    Args:
        content: Text the replacements were generated against
        replacements: Edits to apply
        window: Fallback search window for stale offsets

    Returns:
        ApplyResult with the new content, number applied and counts per kind
    """
    result = ApplyResult(content=content)
    if not replacements:
        return result
    if window is None:
        window = OFFSET_FALLBACK_WINDOW

    offset_based = sorted(
        (r for r in replacements if r.has_offsets),
        key=lambda r: r.start,  # type: ignore[arg-type, return-value]
        reverse=True,
    )
    line_based = [r for r in replacements if not r.has_offsets]

    offset_result = ApplyResult(content=content)
    for r in offset_based:
        updated = _apply_offset(offset_result.content, r, window)
        if updated is None:
            logger.debug("Offset replacement not applied at %s: %s", r.start, r.old_href)
            continue
        offset_result.content = updated
        offset_result.count(r.kind_or_default)
    result.merge(offset_result)

    line_result = ApplyResult(content=result.content)
    for r in line_based:
        updated = replace_link_on_line(line_result.content, r.line, r.old_href, r.new_href)
        if updated == line_result.content:
            logger.debug("Line replacement not applied on line %d: %s", r.line, r.old_href)
            continue
        line_result.content = updated
        line_result.count(r.kind_or_default)
    result.merge(line_result)

    return result
