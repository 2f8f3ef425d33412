"""LinkTargetError model (UNO: single model)."""

from dataclasses import dataclass

LINK_TARGET_NOT_FOUND = "LINK TARGET NOT FOUND"


@dataclass(frozen=True)
class LinkTargetError:
    """A broken link that could not be repaired automatically.

    Returned next to successful replacements instead of being raised, so one
    run can report every broken link in a file.
    """

    file: str
    line_number: int
    line: str
    type: str = LINK_TARGET_NOT_FOUND

    def to_dict(self) -> dict[str, object]:
        return {
            "type": self.type,
            "file": self.file,
            "lineNumber": self.line_number,
            "line": self.line,
        }
