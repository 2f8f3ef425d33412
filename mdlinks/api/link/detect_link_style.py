"""Detect the dominant link style of a markdown tree."""

from typing import Literal

from ..file_service.FileService import FileService
from .extract_links_from_directory import extract_links_from_directory
from .is_external_link import is_external_link


def detect_link_style(file_service: FileService, directory: str) -> Literal["relative", "absolute"]:
    """'absolute' when '/'-rooted links outnumber relative ones, else 'relative'.

    External and anchor-only links are not counted.
    """
    relative_count = 0
    absolute_count = 0
    for link in extract_links_from_directory(directory, file_service):
        if is_external_link(link.href) or link.href.startswith("#"):
            continue
        if link.href.startswith("/"):
            absolute_count += 1
        else:
            relative_count += 1
    return "relative" if relative_count >= absolute_count else "absolute"
