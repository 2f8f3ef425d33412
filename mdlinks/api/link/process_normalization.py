"""Normalize every link of a markdown tree (UNO: single function)."""

from ..config.LinksConfig import LinksConfig
from ..file_service.FileService import FileService
from .BatchResult import BatchResult
from .generate_normalization_replacements import generate_normalization_replacements
from .ParsedLink import ParsedLink
from .process_directory_with_link_replacements import process_directory_with_link_replacements
from .Replacement import Replacement


def process_normalization(
    directory: str,
    config: LinksConfig,
    file_service: FileService,
    write: bool = True,
) -> BatchResult:
    def generate(links: list[ParsedLink], file: str, _config, fs: FileService, _lines) -> list[Replacement]:
        return generate_normalization_replacements(links, file, config, fs)

    return process_directory_with_link_replacements(directory, generate, config, file_service, write=write)
