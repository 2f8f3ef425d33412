"""File service factory."""

from typing import Any

from .FileService import FileService

_BACKENDS = ("local", "memory")


def get_file_service(backend_type: str = "local", **kwargs: Any) -> FileService:
    """Create a file service backend by name.

    Args:
        backend_type: "local" or "memory"
        kwargs: Passed to the backend constructor (e.g. files=, cwd= for memory)

    Raises:
        ValueError: For an unknown backend type
    """
    if backend_type not in _BACKENDS:
        raise ValueError(f"Unsupported file service type: {backend_type!r} (supported: {list(_BACKENDS)})")
    module = __import__(f"mdlinks.api.file_service._{backend_type}._Impl", fromlist=[""])
    return module._Impl(**kwargs)
