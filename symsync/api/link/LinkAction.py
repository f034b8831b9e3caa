"""One planned link mutation in one subdirectory."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .LinkSpec import LinkSpec


class ActionKind(str, Enum):
    REMOVE = "remove"
    CREATE = "create"


@dataclass(frozen=True)
class LinkAction:
    kind: ActionKind
    spec: LinkSpec
    directory: Path

    @property
    def link_path(self) -> Path:
        return self.directory / self.spec.target

    @property
    def source_path(self) -> Path:
        return self.directory / self.spec.source

    def describe(self, dry_run: bool = False) -> str:
        """Human-readable line for an applied (or simulated) action."""
        if self.kind is ActionKind.REMOVE:
            if dry_run:
                return f"Dry run: removing symlink {self.spec} from {self.directory}"
            return f"Removed symlink {self.spec} from {self.directory}"
        if dry_run:
            return f"Dry run: creating symlink {self.spec} in {self.directory}"
        return f"Created symlink {self.spec} in {self.directory}"
