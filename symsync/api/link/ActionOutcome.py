"""What happened to one LinkAction."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .LinkAction import ActionKind, LinkAction
from .OperationError import OperationError


class OutcomeStatus(str, Enum):
    APPLIED = "applied"
    SIMULATED = "simulated"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class ActionOutcome:
    action: LinkAction
    status: OutcomeStatus
    reason: str = ""
    error: OperationError | None = None

    @property
    def is_change(self) -> bool:
        """True for actions that changed (or would change) the filesystem."""
        return self.status in (OutcomeStatus.APPLIED, OutcomeStatus.SIMULATED)

    def message(self, dry_run: bool = False) -> str:
        if self.status is OutcomeStatus.FAILED:
            return str(self.error)
        if self.status is OutcomeStatus.SKIPPED:
            verb = "creating" if self.action.kind is ActionKind.CREATE else "removing"
            return f"Skipped {verb} symlink {self.action.spec} in {self.action.directory}: {self.reason}"
        return self.action.describe(dry_run=dry_run)

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": self.action.kind.value,
            "target": self.action.spec.target,
            "source": self.action.spec.source,
            "status": self.status.value,
            "reason": str(self.error) if self.error is not None else self.reason,
        }
