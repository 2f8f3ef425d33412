"""Resolve a link when the dataset root may be unknown."""

from pathlib import Path

from ..file_service.FileService import FileService
from ._detect_dataset_root import _detect_dataset_root
from ._host_dir import _host_dir
from .resolve_markdown_path import resolve_markdown_path


def resolve_markdown_path_auto(
    *,
    file: str | Path,
    link_path: str,
    docs_folders: list[str],
    file_service: FileService,
    dataset_root: str | Path | None = None,
) -> str:
    """resolve_markdown_path with dataset root detection.

    Without a dataset_root, the nearest ancestor of the file holding a root
    marker (.git, pyproject.toml, package.json, .mdlinks) is used, falling back
    to the file's own directory. The result goes through file_service.resolve.
    """
    root = str(dataset_root) if dataset_root else None
    if not root:
        start = _host_dir(file)
        root = _detect_dataset_root(start, file_service) or start
    resolved = resolve_markdown_path(file, link_path, docs_folders, root)
    return file_service.resolve(resolved)
