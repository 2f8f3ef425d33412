import posixpath
from pathlib import Path


def _host_dir(file: str | Path) -> str:
    """Directory of a markdown file as a POSIX string ('.' for a bare name)."""
    return posixpath.dirname(str(file)) or "."
