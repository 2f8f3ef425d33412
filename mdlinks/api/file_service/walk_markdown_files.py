"""Recursive markdown file discovery (UNO: single function)."""

import posixpath

from .FileService import FileService


def walk_markdown_files(directory: str, file_service: FileService) -> list[str]:
    """Return every ``.md`` file below directory, depth first in name order."""
    files: list[str] = []
    for entry in file_service.readdir(directory):
        full_path = posixpath.join(directory, entry.name)
        if entry.is_dir:
            files.extend(walk_markdown_files(full_path, file_service))
        elif entry.name.endswith(".md"):
            files.append(full_path)
    return files
