"""Search shallower variants of a broken ``../`` link."""

from pathlib import Path

from ...utils.get_logger import get_logger
from ..file_service.FileService import FileService
from .resolve_markdown_path import resolve_markdown_path

logger = get_logger("link")


def try_resolve_path_variants(
    *,
    file: str | Path,
    link_path: str,
    docs_folders: list[str],
    file_service: FileService,
    dataset_root: str | Path,
) -> str | None:
    """Return the first existing variant of link_path, or None.

    Candidates drop 0, 1, 2, ... leading segments of the link, so the path as
    written is tried first and each later candidate climbs fewer directories.
    When several candidates exist, the least modified one wins.
    """
    if not link_path.startswith("../"):
        return None

    segments = link_path.split("/")
    max_back_steps = sum(1 for segment in segments if segment == "..")

    candidates = []
    for i in range(max_back_steps + 1):
        candidate = "/".join(segments[i:])
        candidates.append(candidate if candidate.startswith(".") else "./" + candidate)

    for candidate in candidates:
        resolved = resolve_markdown_path(file, candidate, docs_folders, dataset_root)
        if file_service.exists(resolved):
            logger.debug("Variant %s of %s exists at %s", candidate, link_path, resolved)
            return candidate
    return None
