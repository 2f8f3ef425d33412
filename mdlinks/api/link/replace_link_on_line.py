"""Line-based href replacement (UNO: single function)."""

import re

_LINE_SPLIT = re.compile(r"\r?\n")


def replace_link_on_line(content: str, line: int, old_href: str, new_href: str) -> str:
    """Replace the first occurrence of old_href on the 1-based line.

    Content is returned unchanged when the line does not exist (including
    line numbers below 1) or does not contain old_href. Output uses
    ``\\r\\n`` if the input contains any, otherwise ``\\n``.

    >>> replace_link_on_line("a\\n[x](b.md) [y](b.md)", 2, "b.md", "c.md")
    'a\\n[x](c.md) [y](b.md)'
    """
    line_ending = "\r\n" if "\r\n" in content else "\n"
    lines = _LINE_SPLIT.split(content)
    idx = line - 1
    if idx < 0 or idx >= len(lines):
        return content
    text = lines[idx]
    pos = text.find(old_href)
    if pos == -1:
        return content
    lines[idx] = text[:pos] + new_href + text[pos + len(old_href) :]
    return line_ending.join(lines)
