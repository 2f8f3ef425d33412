"""ExtractedLink model (UNO: single model)."""

from dataclasses import dataclass

from .ParsedLink import ParsedLink


@dataclass(frozen=True)
class ExtractedLink(ParsedLink):
    """A ParsedLink enriched with the file it came from and its classification."""

    file_path: str = ""
    type: str = "other"
    anchor: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "file_path": self.file_path,
            "href": self.href,
            "text": self.text,
            "line": self.line,
            "start": self.start,
            "end": self.end,
            "type": self.type,
            "anchor": self.anchor,
        }
