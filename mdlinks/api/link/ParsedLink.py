"""ParsedLink model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedLink:
    """A markdown link found in content.

    start/end are character offsets of the href inside the original content,
    or None when the href could not be located in the source.
    """

    href: str
    text: str
    line: int
    start: int | None = None
    end: int | None = None
