"""Remove one stale symbolic link."""

import os

from .LinkAction import LinkAction
from .OperationError import OperationError


def remove_link(action: LinkAction) -> bool:
    """Unlink ``action.link_path`` if it is a symbolic link.

    Returns:
        True if a link was removed, False if there was none.

    Raises:
        OperationError: If the unlink call fails.
    """
    if not action.link_path.is_symlink():
        return False
    try:
        os.unlink(action.link_path)
    except OSError as e:
        raise OperationError(action, e) from e
    return True
