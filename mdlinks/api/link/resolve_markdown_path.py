"""Resolve a markdown link target to a dataset path."""

import posixpath
from pathlib import Path

from ._host_dir import _host_dir
from ._posix_join import _posix_join


def resolve_markdown_path(
    file: str | Path,
    link_path: str,
    docs_folders: list[str],
    dataset_root: str | Path,
) -> str:
    """Turn link_path, written inside file, into an absolute dataset path.

    The anchor is dropped before resolving; a query string is kept. Rules, in order:

    1. First segment is a docs folder: the link is already dataset-rooted.
    2. ``./``, ``../`` or a bare filename: relative to the file's directory.
    3. Anything else: rooted at dataset_root, offset by the file's directory
       position inside the dataset.

    Raises:
        ValueError: If link_path is empty
    """
    if not link_path:
        raise ValueError("linkPath is undefined")

    no_anchor = link_path.split("#", 1)[0]
    first_segment = no_anchor.split("/", 1)[0]
    root = str(dataset_root)

    if first_segment in docs_folders:
        return _posix_join(root, no_anchor)
    if no_anchor.startswith("./") or no_anchor.startswith("../") or "/" not in no_anchor:
        return _posix_join(_host_dir(file), no_anchor)
    file_relative_dir = posixpath.relpath(_host_dir(file), root)
    return _posix_join(root, file_relative_dir, no_anchor)
