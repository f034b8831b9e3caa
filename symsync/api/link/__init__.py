"""Link API domain: load desired links and reconcile them against the filesystem."""

from .ActionOutcome import ActionOutcome, OutcomeStatus
from .LinkAction import ActionKind, LinkAction
from .LinkSpec import LinkSpec
from .ObservedLink import ObservedLink
from .OperationError import OperationError
from .ReconcilePlan import ReconcilePlan
from .ScanError import ScanError
from .SubdirectoryResult import SubdirectoryResult

__all__ = [
    "ActionKind",
    "ActionOutcome",
    "LinkAction",
    "LinkSpec",
    "ObservedLink",
    "OperationError",
    "OutcomeStatus",
    "ReconcilePlan",
    "ScanError",
    "SubdirectoryResult",
]
