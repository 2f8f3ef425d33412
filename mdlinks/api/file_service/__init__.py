"""File service API module."""

from .DirEntry import DirEntry
from .FileService import FileService
from .collect_markdown_files import collect_markdown_files
from .get_file_service import get_file_service
from .walk_markdown_files import walk_markdown_files

__all__ = ["DirEntry", "FileService", "collect_markdown_files", "get_file_service", "walk_markdown_files"]
