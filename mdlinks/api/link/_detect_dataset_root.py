import posixpath

from ..file_service.FileService import FileService

ROOT_MARKERS = (".git", "pyproject.toml", "package.json", ".mdlinks")


def _detect_dataset_root(start_dir: str, file_service: FileService, max_depth: int = 10) -> str | None:
    """Closest ancestor of start_dir (inclusive) holding a root marker."""
    directory = start_dir
    for _ in range(max_depth):
        if any(file_service.exists(posixpath.join(directory, marker)) for marker in ROOT_MARKERS):
            return directory
        parent = posixpath.dirname(directory)
        if not parent or parent == directory:
            break
        directory = parent
    return None
