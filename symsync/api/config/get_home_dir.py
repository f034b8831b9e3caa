"""Get symsync home directory path or path under it."""

import os
from pathlib import Path

from ...constants import SYMSYNC_HOME_ENV, SYMSYNC_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get symsync home directory path or path under it.

    Checks the SYMSYNC_HOME environment variable first, then HOME, and
    defaults to ``~/.symsync``.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.symsync")
        >>> get_home_dir("config.json")
        Path("/Users/user/.symsync/config.json")
    """
    home_env = os.environ.get(SYMSYNC_HOME_ENV)
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # HOME first so tests can isolate it
        user_home = os.environ.get("HOME")
        home = Path(user_home) / SYMSYNC_HOME_EXT if user_home else Path.home() / SYMSYNC_HOME_EXT

    return home / Path(*parts) if parts else home
