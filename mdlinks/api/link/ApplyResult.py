"""ApplyResult model (UNO: single model)."""

from dataclasses import dataclass, field

from .ReplacementKind import WRITE_TRIGGER_KINDS


@dataclass
class ApplyResult:
    """Outcome of applying a list of replacements to content."""

    content: str
    applied: int = 0
    by_kind: dict[str, int] = field(default_factory=dict)

    def count(self, kind: str) -> None:
        self.applied += 1
        self.by_kind[kind] = self.by_kind.get(kind, 0) + 1

    def merge(self, other: "ApplyResult") -> None:
        """Fold another partition's counts into this one and take its content."""
        self.content = other.content
        self.applied += other.applied
        for kind, count in other.by_kind.items():
            self.by_kind[kind] = self.by_kind.get(kind, 0) + count

    @property
    def triggers_write(self) -> bool:
        """True when an applied replacement's kind requires the file to be written back."""
        return sum(self.by_kind.get(kind, 0) for kind in WRITE_TRIGGER_KINDS) > 0
