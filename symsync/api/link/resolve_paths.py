"""Resolve the root directory and links file from config and CLI overrides."""

from pathlib import Path

from ...utils.configure_logging import configure_logging
from ...utils.expand_path import expand_path
from ..config.SymsyncConfig import SymsyncConfig
from .LinkPaths import LinkPaths


def resolve_paths(root: str | Path | None = None, links_file: str | Path | None = None) -> LinkPaths:
    """Combine the config file with explicit overrides.

    Explicit arguments resolve against the current working directory. From
    the config file, ``links_file`` resolves against the current working
    directory and ``root`` against the directory holding the links file.

    Raises:
        ConfigurationError: If the config file is invalid.
    """
    config = SymsyncConfig.load()
    configure_logging(level=config.log.level)

    links_path = expand_path(links_file if links_file is not None else config.links_file)
    if root is not None:
        root_path = expand_path(root)
    else:
        root_path = expand_path(config.root, base=links_path.parent)

    return LinkPaths(root=root_path, links_file=links_path)
