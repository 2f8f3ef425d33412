"""Abstract file-system collaborator used by link processing."""

from abc import ABC, abstractmethod

from .DirEntry import DirEntry


class FileService(ABC):
    """Read/write/exists/resolve/readdir over string paths.

    Link processing only ever talks to the file system through this interface,
    so the same pipeline runs against disk or an in-memory tree.
    """

    @abstractmethod
    def read_file(self, path: str) -> str:
        """Return file content.

        Raises:
            FileNotFoundError: If the file does not exist ("File not found: <path>")
        """
        pass

    @abstractmethod
    def write_file(self, path: str, content: str) -> None:
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def resolve(self, path: str) -> str:
        """Return the absolute, normalized form of path."""
        pass

    @abstractmethod
    def readdir(self, path: str) -> list[DirEntry]:
        """List direct children of a directory, sorted by name.

        Raises:
            FileNotFoundError: If the directory does not exist
        """
        pass
