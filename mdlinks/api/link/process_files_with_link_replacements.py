"""Run one replacement strategy over a list of files."""

from collections.abc import Callable

from ...utils.get_logger import get_logger
from ..config.LinksConfig import LinksConfig
from ..file_service.FileService import FileService
from .BatchResult import BatchResult
from .ParsedLink import ParsedLink
from .process_file_replacement import process_file_replacement
from .Replacement import Replacement

logger = get_logger("link")

# (links, file, config, file_service, lines) -> replacements
BatchGenerator = Callable[[list[ParsedLink], str, LinksConfig | None, FileService, list[str]], list[Replacement]]


def process_files_with_link_replacements(
    files: list[str],
    generate: BatchGenerator,
    config: LinksConfig | None,
    file_service: FileService,
    write: bool = True,
) -> BatchResult:
    """Apply generate to each file in turn and aggregate the counts.

    A file is listed in modified_files when a write-triggering replacement
    applied to it; it is only written back when write is true. Failures are
    recorded per file and do not stop the batch. Files already written stay
    written.
    """
    result = BatchResult(total_files=len(files))

    for file in files:

        def generate_for_file(links: list[ParsedLink], _content: str, lines: list[str], file: str = file):
            return generate(links, file, config, file_service, lines)

        try:
            applied = process_file_replacement(file, generate_for_file, file_service, write=write)
        except (OSError, ValueError) as e:
            logger.warning("Link processing failed for %s: %s", file, e)
            result.errors.append({"file": file, "error": str(e)})
            continue
        if applied.triggers_write:
            result.modified_files.append(file)
        result.add_counts(applied.by_kind, applied.applied)

    return result
