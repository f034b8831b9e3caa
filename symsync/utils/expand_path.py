"""Expand user path (~/...) to absolute path."""

import os
from pathlib import Path


def expand_path(path: str | Path, base: Path | None = None) -> Path:
    """Expand ``~`` and make ``path`` absolute.

    Relative paths resolve against ``base`` (default: current working directory).
    Symlinks are not resolved.
    """
    expanded = Path(path).expanduser()
    if not expanded.is_absolute():
        expanded = (base if base is not None else Path.cwd()) / expanded
    return Path(os.path.normpath(expanded))
