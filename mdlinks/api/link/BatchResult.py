"""BatchResult model (UNO: single model)."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class BatchResult:
    """Aggregate of one strategy run over many files."""

    total_files: int = 0
    processed_files: int = 0
    total_links_updated: int = 0
    total_replacements_applied: int = 0
    by_kind: dict[str, int] = field(default_factory=dict)
    modified_files: list[str] = field(default_factory=list)
    errors: list[dict[str, str]] = field(default_factory=list)
    link_errors: list[dict[str, Any]] = field(default_factory=list)

    def add_counts(self, by_kind: dict[str, int], applied: int) -> None:
        self.processed_files += 1
        self.total_replacements_applied += applied
        self.total_links_updated += sum(by_kind.values())
        for kind, count in by_kind.items():
            self.by_kind[kind] = self.by_kind.get(kind, 0) + count

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_files": self.total_files,
            "processed_files": self.processed_files,
            "total_links_updated": self.total_links_updated,
            "total_replacements_applied": self.total_replacements_applied,
            "by_kind": dict(self.by_kind),
            "modified_files": list(self.modified_files),
            "errors": list(self.errors),
            "link_errors": list(self.link_errors),
        }
