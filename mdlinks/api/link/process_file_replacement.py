"""Read, rewrite and persist one markdown file."""

import re
from collections.abc import Callable
from pathlib import Path

from ...utils.get_logger import get_logger
from ..file_service.FileService import FileService
from .ApplyResult import ApplyResult
from .ParsedLink import ParsedLink
from .process_file_with_links import process_file_with_links
from .Replacement import Replacement

logger = get_logger("link")

ReplacementGenerator = Callable[[list[ParsedLink], str, list[str]], list[Replacement]]


def process_file_replacement(
    file: str | Path,
    generate: ReplacementGenerator,
    file_service: FileService,
    write: bool = True,
) -> ApplyResult:
    """Apply generate's replacements to file and write it back when needed.

    generate receives the parsed links, the raw content and its lines. The file
    is written only if at least one normalizedFull, patched, pathSubstitution or
    normalizedRel replacement applied. Replacements of any other kind
    (including the default ``updated``) change the returned content only.
    With write false nothing is written; ``triggers_write`` on the result still
    tells whether the file would have been.

    Raises:
        FileNotFoundError: If file does not exist
    """
    content = file_service.read_file(file)
    lines = re.split(r"\r?\n", content)
    result = process_file_with_links(content, lambda links: generate(links, content, lines))

    if write and result.triggers_write:
        file_service.write_file(file, result.content)
        logger.info("Updated %d link(s) in %s", result.applied, file)
    return result
