"""Per-link filesystem failure that does not abort the run."""

from .LinkAction import ActionKind, LinkAction


class OperationError(Exception):
    """A create or remove call failed for one link in one subdirectory."""

    def __init__(self, action: LinkAction, cause: OSError):
        self.action = action
        self.cause = cause
        verb = "remove" if action.kind is ActionKind.REMOVE else "create"
        reason = cause.strerror or str(cause)
        if action.kind is ActionKind.REMOVE:
            message = f"Failed to {verb} symlink {action.spec.target} from {action.directory}: {reason}"
        else:
            message = f"Failed to {verb} symlink {action.spec} in {action.directory}: {reason}"
        super().__init__(message)
