"""Local disk file service."""

import os
from pathlib import Path

from ..DirEntry import DirEntry
from ..FileService import FileService


class _Impl(FileService):
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read_file(self, path: str) -> str:
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        # newline="" keeps CRLF line endings intact for the applier
        with file_path.open(encoding=self.encoding, newline="") as fh:
            return fh.read()

    def write_file(self, path: str, content: str) -> None:
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with file_path.open("w", encoding=self.encoding, newline="") as fh:
            fh.write(content)

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def resolve(self, path: str) -> str:
        return os.path.abspath(os.path.expanduser(path))

    def readdir(self, path: str) -> list[DirEntry]:
        dir_path = Path(path)
        if not dir_path.is_dir():
            raise FileNotFoundError(f"Directory not found: {path}")
        return [DirEntry(name=child.name, is_dir=child.is_dir()) for child in sorted(dir_path.iterdir())]
