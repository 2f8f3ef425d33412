"""ExistenceCheckResult model (UNO: single model)."""

from dataclasses import dataclass, field

from .LinkTargetError import LinkTargetError
from .Replacement import Replacement


@dataclass
class ExistenceCheckResult:
    """Patches for repairable links plus findings for the rest."""

    replacements: list[Replacement] = field(default_factory=list)
    errors: list[LinkTargetError] = field(default_factory=list)
