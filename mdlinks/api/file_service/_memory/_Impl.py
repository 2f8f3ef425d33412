"""In-memory file service.

Directories are implied by the files stored beneath them. Used by tests and
by dry runs, where a batch must see its own writes without touching disk.
"""

import posixpath

from ..DirEntry import DirEntry
from ..FileService import FileService


class _Impl(FileService):
    def __init__(self, files: dict[str, str] | None = None, cwd: str = "/"):
        self.cwd = posixpath.normpath(cwd)
        self.files: dict[str, str] = {}
        self.writes: list[str] = []
        for path, content in (files or {}).items():
            self.files[self.resolve(path)] = content

    def read_file(self, path: str) -> str:
        key = self.resolve(path)
        if key not in self.files:
            raise FileNotFoundError(f"File not found: {path}")
        return self.files[key]

    def write_file(self, path: str, content: str) -> None:
        key = self.resolve(path)
        self.files[key] = content
        self.writes.append(key)

    def exists(self, path: str) -> bool:
        key = self.resolve(path)
        return key in self.files or self._is_dir(key)

    def resolve(self, path: str) -> str:
        return posixpath.normpath(posixpath.join(self.cwd, path))

    def readdir(self, path: str) -> list[DirEntry]:
        key = self.resolve(path)
        if not self._is_dir(key):
            raise FileNotFoundError(f"Directory not found: {path}")
        prefix = key.rstrip("/") + "/"
        children: dict[str, bool] = {}
        for file_path in self.files:
            if not file_path.startswith(prefix):
                continue
            name, sep, _ = file_path[len(prefix) :].partition("/")
            children[name] = children.get(name, False) or bool(sep)
        return [DirEntry(name=name, is_dir=is_dir) for name, is_dir in sorted(children.items())]

    def _is_dir(self, key: str) -> bool:
        if key == "/":
            return bool(self.files)
        prefix = key.rstrip("/") + "/"
        return any(file_path.startswith(prefix) for file_path in self.files)
