"""Markdown files named by a file-or-directory argument (UNO: single function)."""

from .FileService import FileService
from .walk_markdown_files import walk_markdown_files


def collect_markdown_files(path: str, file_service: FileService) -> list[str]:
    """Walk path when it is a directory, otherwise return it as the only file.

    Raises:
        FileNotFoundError: If path is neither a directory nor an existing ``.md`` file
    """
    try:
        return walk_markdown_files(path, file_service)
    except FileNotFoundError:
        if path.endswith(".md") and file_service.exists(path):
            return [path]
        raise
