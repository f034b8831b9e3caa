"""Resolved locations a link command works on."""

from dataclasses import dataclass
from pathlib import Path

from ..config.ConfigurationError import ConfigurationError


@dataclass(frozen=True)
class LinkPaths:
    root: Path
    links_file: Path

    def require_root(self) -> Path:
        """Return ``root`` if it is a directory.

        Raises:
            ConfigurationError: If the root directory is missing.
        """
        if not self.root.is_dir():
            raise ConfigurationError(f"The root directory {self.root} does not exist or is not accessible.")
        return self.root
