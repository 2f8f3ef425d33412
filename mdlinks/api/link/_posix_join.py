import posixpath
import re

_SLASH_RUN = re.compile(r"/+")


def _posix_join(*parts: str) -> str:
    """Concatenate path parts with '/' and normalize.

    Unlike posixpath.join, an absolute later part does not discard earlier ones:
    ``_posix_join("/dataset", "/a.md") == "/dataset/a.md"``.
    """
    joined = "/".join(part for part in parts if part)
    if not joined:
        return "."
    return posixpath.normpath(_SLASH_RUN.sub("/", joined))
