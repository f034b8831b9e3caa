"""Create one desired symbolic link."""

import os

from .LinkAction import LinkAction
from .OperationError import OperationError


def create_link(action: LinkAction) -> None:
    """Create ``action.link_path`` with link text ``action.spec.source``.

    The link text is the source name verbatim, so it resolves relative to
    the subdirectory the link lives in.

    Raises:
        OperationError: If the symlink call fails (including when the name is taken).
    """
    try:
        os.symlink(action.spec.source, action.link_path)
    except OSError as e:
        raise OperationError(action, e) from e
