"""Normalize a path for mdlinks.

Expands user home directory (~) and returns an absolute path
WITHOUT resolving symlinks, so dataset roots keep the spelling
that link hrefs are computed against.
"""

from pathlib import Path


def normalize_path(path: str | Path) -> Path:
    """Expand user and return absolute path (no symlink resolution)."""
    return Path(path).expanduser().absolute()
