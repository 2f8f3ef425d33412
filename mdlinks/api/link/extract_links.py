"""Markdown link extraction."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from markdown_it import MarkdownIt
from markdown_it.rules_inline import StateInline, autolink, link
from markdown_it.token import Token

from .ParsedLink import ParsedLink

# Characters that may follow a destination: title separator, closing paren or angle bracket
_DESTINATION_END = frozenset(" \t\r\n)>")

_parser: MarkdownIt | None = None


def _destination_start(state: StateInline, start: int) -> int | None:
    """Inline source position of the destination of the link whose '[' is at start.

    None when no parenthesized destination follows the label.
    """
    src = state.src
    label_end = state.md.helpers.parseLinkLabel(state, start, True)
    pos = label_end + 1
    if label_end < 0 or pos >= state.posMax or src[pos] != "(":
        return None
    pos += 1
    while pos < state.posMax and src[pos] in " \t\n":
        pos += 1
    if pos < state.posMax and src[pos] == "<":
        pos += 1
    return pos


def _remember_position(
    rule: Callable[[StateInline, bool], bool], autolinks: bool = False
) -> Callable[[StateInline, bool], bool]:
    """Wrap an inline rule so each link_open it pushes records where it sits in the inline source."""

    def wrapped(state: StateInline, silent: bool) -> bool:
        if silent:
            return rule(state, silent)
        start = state.pos
        first = len(state.tokens)
        if autolinks:
            href_pos: int | None = start + 1
        else:
            href_pos = _destination_start(state, start) if state.src[start] == "[" else None
        if not rule(state, silent):
            return False
        # Inline links end at their closing paren; anything else resolved through a definition
        inline = autolinks or state.src[state.pos - 1] == ")"
        for token in state.tokens[first:]:
            if token.type == "link_open":
                token.meta["src_pos"] = start
                token.meta["href_pos"] = href_pos if inline else None
                token.meta["reference"] = not inline
                break
        return True

    return wrapped


def _get_parser() -> MarkdownIt:
    """Shared CommonMark parser that reports hrefs exactly as written."""
    global _parser
    if _parser is None:
        md = MarkdownIt("commonmark")
        # No percent-encoding and no scheme filtering: hrefs are rewritten, never rendered
        md.normalizeLink = lambda url: url  # type: ignore[method-assign]
        md.validateLink = lambda url: True  # type: ignore[method-assign]
        md.inline.ruler.at("link", _remember_position(link))
        md.inline.ruler.at("autolink", _remember_position(autolink, autolinks=True))
        _parser = md
    return _parser


def _line_starts(content: str) -> list[int]:
    starts = [0]
    for match in re.finditer("\n", content):
        starts.append(match.end())
    return starts


def _link_text(children: Sequence[Token], open_idx: int) -> str:
    """Concatenate the direct text children of the link opened at open_idx."""
    level = children[open_idx].level + 1
    parts: list[str] = []
    idx = open_idx + 1
    while idx < len(children):
        child = children[idx]
        if child.type == "link_close" and child.level == level - 1:
            break
        if child.level == level:
            if child.type == "text":
                parts.append(child.content)
            elif child.type == "softbreak":
                parts.append("\n")
        idx += 1
    return "".join(parts)


def _to_source(content: str, line_starts: list[int], block: Token, pos: int) -> tuple[int, int | None]:
    """Map a position in a block's inline source to (0-based line, offset in content).

    The inline source drops container prefixes (quote markers, list indent) from
    each line, so the column is found by matching the line's text against the
    source line. The offset is None when that match fails.
    """
    inline_src = block.content
    line_begin = inline_src.rfind("\n", 0, pos) + 1
    line_end = inline_src.find("\n", pos)
    piece = inline_src[line_begin : line_end if line_end >= 0 else len(inline_src)].rstrip()
    line_idx = (block.map or [0])[0] + inline_src.count("\n", 0, pos)
    if line_idx >= len(line_starts):
        return line_idx, None

    src_begin = line_starts[line_idx]
    src_end = line_starts[line_idx + 1] - 1 if line_idx + 1 < len(line_starts) else len(content)
    source_line = content[src_begin:src_end].rstrip()
    if source_line.endswith(piece):
        column = len(source_line) - len(piece)
    else:
        column = source_line.find(piece)
        if column < 0:
            return line_idx, None
    return line_idx, src_begin + column + (pos - line_begin)


def _href_offsets(content: str, href: str, offset: int | None) -> tuple[int | None, int | None]:
    """Offsets of href at offset, only when the source spells the destination exactly as href."""
    if not href or offset is None:
        return None, None
    end = offset + len(href)
    if content[offset:end] != href:
        return None, None
    if end < len(content) and content[end] not in _DESTINATION_END:
        return None, None
    return offset, end


def extract_links(content: str) -> list[ParsedLink]:
    """Extract every markdown link from content, in source order.

    Reference-style links (`[text][ref]`, `[ref]`) are not extracted: their
    target is written once in a definition, not at the link. Offsets locate
    the href itself inside content; destinations written with escapes or
    entities get None offsets.
    Malformed markdown never raises: it simply yields fewer links.
    """
    if not content:
        return []

    tokens = _get_parser().parse(content)
    line_starts = _line_starts(content)
    links: list[ParsedLink] = []

    for block in tokens:
        if block.type != "inline" or not block.children:
            continue
        children = block.children
        for idx, child in enumerate(children):
            if child.type != "link_open" or child.meta.get("reference"):
                continue
            href = str(child.attrGet("href") or "")
            text = _link_text(children, idx)

            line = 1
            start = end = None
            src_pos = child.meta.get("src_pos")
            if block.map and src_pos is not None:
                line_idx, _ = _to_source(content, line_starts, block, src_pos)
                line = line_idx + 1
                href_pos = child.meta.get("href_pos")
                if href_pos is not None:
                    _, offset = _to_source(content, line_starts, block, href_pos)
                    start, end = _href_offsets(content, href, offset)
            elif block.map:
                line = block.map[0] + 1

            links.append(ParsedLink(href=href, text=text, line=line, start=start, end=end))

    return links
