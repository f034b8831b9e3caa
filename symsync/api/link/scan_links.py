"""Harvest the symbolic links present in one subdirectory."""

import os
from pathlib import Path

from .ObservedLink import ObservedLink


def scan_links(directory: Path) -> list[ObservedLink]:
    """Return the direct entries of ``directory`` that are symbolic links, sorted by name."""
    observed: list[ObservedLink] = []
    for entry in sorted(directory.iterdir()):
        if entry.is_symlink():
            observed.append(ObservedLink(source=os.readlink(entry), target=entry.name, directory=directory))
    return observed
