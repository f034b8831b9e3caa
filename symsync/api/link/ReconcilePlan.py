"""Removals and creations for every subdirectory, computed before mutation."""

from dataclasses import dataclass, field
from pathlib import Path

from .LinkAction import LinkAction
from .ScanError import ScanError


@dataclass
class ReconcilePlan:
    subdirectories: list[Path] = field(default_factory=list)
    removals: list[LinkAction] = field(default_factory=list)
    creations: list[LinkAction] = field(default_factory=list)
    scan_errors: list[ScanError] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.removals and not self.creations
