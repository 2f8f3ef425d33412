"""Replacement model (UNO: single model)."""

from dataclasses import dataclass

from .ReplacementKind import UPDATED


@dataclass(frozen=True)
class Replacement:
    """One href edit to apply to a specific content version.

    With both start and end set the edit is offset-based, otherwise it is
    applied to the first occurrence of old_href on line (1-based).
    """

    line: int
    old_href: str
    new_href: str
    start: int | None = None
    end: int | None = None
    kind: str | None = None

    @property
    def has_offsets(self) -> bool:
        return isinstance(self.start, int) and isinstance(self.end, int)

    @property
    def kind_or_default(self) -> str:
        return self.kind or UPDATED
