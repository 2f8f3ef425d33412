"""Check (and optionally repair) every link of a markdown tree."""

from ..config.LinksConfig import LinksConfig
from ..file_service.FileService import FileService
from .BatchResult import BatchResult
from .generate_existence_check_replacements import generate_existence_check_replacements
from .ParsedLink import ParsedLink
from .process_directory_with_link_replacements import process_directory_with_link_replacements
from .Replacement import Replacement


def process_existence_check(
    directory: str,
    config: LinksConfig,
    file_service: FileService,
    fix: bool = False,
) -> BatchResult:
    """Report links whose target is missing.

    Repairable links are counted as ``patched`` either way and written only
    when fix is true. Unrepairable ones end up in link_errors.
    """
    link_errors: list[dict] = []

    def generate(links: list[ParsedLink], file: str, _config, fs: FileService, lines: list[str]) -> list[Replacement]:
        checked = generate_existence_check_replacements(
            links=links,
            file=file,
            config=config,
            file_service=fs,
            lines=lines,
        )
        link_errors.extend(error.to_dict() for error in checked.errors)
        return checked.replacements

    result = process_directory_with_link_replacements(directory, generate, config, file_service, write=fix)
    result.link_errors.extend(link_errors)
    return result
