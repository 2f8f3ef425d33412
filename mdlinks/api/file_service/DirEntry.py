"""Directory entry model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DirEntry:
    """A single child of a directory listing."""

    name: str
    is_dir: bool
