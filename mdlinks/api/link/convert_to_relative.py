"""Relative path computation (UNO: single function)."""

import posixpath
from pathlib import Path


def convert_to_relative(base_dir: str | Path, target_path: str | Path) -> str:
    """POSIX path of target_path relative to base_dir.

    Returns './' when both name the same location.
    """
    rel = posixpath.relpath(str(target_path), str(base_dir))
    if rel == ".":
        return "./"
    return rel.replace("\\", "/")
