"""Extract and classify the links of one markdown file."""

from dataclasses import asdict

from ..file_service.FileService import FileService
from .classify_link_type import classify_link_type
from .extract_anchor import extract_anchor
from .extract_links import extract_links
from .ExtractedLink import ExtractedLink


def extract_links_from_file(file_path: str, file_service: FileService) -> list[ExtractedLink]:
    """Read file_path and return its links with file, type and anchor.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    content = file_service.read_file(file_path)
    return [
        ExtractedLink(
            **asdict(link),
            file_path=file_path,
            type=classify_link_type(link.href),
            anchor=extract_anchor(link.href),
        )
        for link in extract_links(content)
    ]
