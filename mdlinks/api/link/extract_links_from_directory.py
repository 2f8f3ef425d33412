"""Extract links from every markdown file below a directory."""

from ..file_service.FileService import FileService
from ..file_service.walk_markdown_files import walk_markdown_files
from .extract_links_from_file import extract_links_from_file
from .ExtractedLink import ExtractedLink


def extract_links_from_directory(directory: str, file_service: FileService) -> list[ExtractedLink]:
    """Concatenate the links of each ``.md`` file; order within a file is source order."""
    links: list[ExtractedLink] = []
    for file_path in walk_markdown_files(directory, file_service):
        links.extend(extract_links_from_file(file_path, file_service))
    return links
