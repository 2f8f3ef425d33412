"""Substitute a path prefix in every link of a markdown tree (UNO: single function)."""

from collections.abc import Iterable

from ..file_service.FileService import FileService
from .BatchResult import BatchResult
from .generate_path_substitution_replacements import generate_path_substitution_replacements
from .ParsedLink import ParsedLink
from .process_directory_with_link_replacements import process_directory_with_link_replacements
from .Replacement import Replacement


def process_path_substitution(
    directory: str,
    old_base: str,
    new_base: str,
    file_service: FileService,
    exclusion_list: Iterable[str] = (),
    write: bool = True,
) -> BatchResult:
    exclusions = tuple(exclusion_list)

    def generate(links: list[ParsedLink], _file, _config, _fs, _lines) -> list[Replacement]:
        return generate_path_substitution_replacements(links, old_base, new_base, exclusions)

    return process_directory_with_link_replacements(directory, generate, None, file_service, write=write)
