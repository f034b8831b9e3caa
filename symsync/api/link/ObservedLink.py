"""Symbolic link found on disk inside one subdirectory."""

from dataclasses import dataclass
from pathlib import Path

from .LinkSpec import LinkSpec


@dataclass(frozen=True)
class ObservedLink:
    """Existing link ``directory/target`` whose link text is ``source``."""

    source: str
    target: str
    directory: Path

    @property
    def spec(self) -> LinkSpec:
        """The pair this link realizes, comparable with desired LinkSpecs."""
        return LinkSpec(source=self.source, target=self.target)
