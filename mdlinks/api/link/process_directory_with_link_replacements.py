"""Run one replacement strategy over a markdown tree (UNO: single function)."""

from ..config.LinksConfig import LinksConfig
from ..file_service.FileService import FileService
from ..file_service.collect_markdown_files import collect_markdown_files
from .BatchResult import BatchResult
from .process_files_with_link_replacements import BatchGenerator, process_files_with_link_replacements


def process_directory_with_link_replacements(
    directory: str,
    generate: BatchGenerator,
    config: LinksConfig | None,
    file_service: FileService,
    write: bool = True,
) -> BatchResult:
    """directory may also name a single markdown file."""
    files = collect_markdown_files(directory, file_service)
    return process_files_with_link_replacements(files, generate, config, file_service, write=write)
