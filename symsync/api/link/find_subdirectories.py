"""Enumerate the leaf subdirectories (root/*/*) that links are realized in."""

from collections.abc import Callable
from pathlib import Path

from ...utils.get_logger import get_logger
from ..config.ConfigurationError import ConfigurationError
from .ScanError import ScanError


def _visible_dirs(directory: Path) -> list[Path]:
    return sorted(p for p in directory.iterdir() if not p.name.startswith(".") and p.is_dir())


def find_subdirectories(root: Path, on_error: Callable[[ScanError], None] | None = None) -> list[Path]:
    """Return every directory exactly two levels below ``root``, sorted.

    Hidden entries are ignored, like shell globbing of ``root/*/*``. A
    mid-level directory that cannot be listed is passed to ``on_error`` as a
    ScanError and skipped; without ``on_error`` the ScanError is raised.

    Raises:
        ConfigurationError: If ``root`` itself cannot be listed.
    """
    try:
        middles = _visible_dirs(root)
    except OSError as e:
        raise ConfigurationError(f"The root directory {root} cannot be read: {e.strerror or e}") from e

    leaves: list[Path] = []
    for middle in middles:
        try:
            leaves.extend(_visible_dirs(middle))
        except OSError as e:
            error = ScanError(middle, e)
            if on_error is None:
                raise error from e
            get_logger("link.find_subdirectories").warning(str(error))
            on_error(error)
    return leaves
