"""Per-subdirectory record of reconciliation outcomes."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .ActionOutcome import ActionOutcome, OutcomeStatus
from .LinkAction import ActionKind
from .ScanError import ScanError


@dataclass
class SubdirectoryResult:
    directory: Path
    outcomes: list[ActionOutcome] = field(default_factory=list)
    error: ScanError | None = None

    def _count(self, kind: ActionKind | None, *statuses: OutcomeStatus) -> int:
        return sum(
            1 for o in self.outcomes if o.status in statuses and (kind is None or o.action.kind is kind)
        )

    @property
    def removed(self) -> int:
        return self._count(ActionKind.REMOVE, OutcomeStatus.APPLIED, OutcomeStatus.SIMULATED)

    @property
    def created(self) -> int:
        return self._count(ActionKind.CREATE, OutcomeStatus.APPLIED, OutcomeStatus.SIMULATED)

    @property
    def skipped(self) -> int:
        return self._count(None, OutcomeStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(None, OutcomeStatus.FAILED)

    @property
    def reportable(self) -> bool:
        return bool(self.outcomes) or self.error is not None

    @classmethod
    def group(
        cls,
        directories: Iterable[Path],
        outcomes: Iterable[ActionOutcome],
        scan_errors: Iterable[ScanError] = (),
    ) -> list["SubdirectoryResult"]:
        """One record per directory, in ``directories`` order.

        A scan error for a directory outside ``directories`` (an unreadable
        mid-level directory) gets a record of its own at the end.
        """
        results = {directory: cls(directory) for directory in directories}
        for outcome in outcomes:
            results.setdefault(outcome.action.directory, cls(outcome.action.directory)).outcomes.append(outcome)
        for error in scan_errors:
            results.setdefault(error.directory, cls(error.directory)).error = error
        return list(results.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "directory": str(self.directory),
            "removed": self.removed,
            "created": self.created,
            "skipped": self.skipped,
            "failed": self.failed,
            "error": str(self.error) if self.error is not None else "",
            "outcomes": [o.to_dict() for o in self.outcomes],
        }
