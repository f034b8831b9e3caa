"""Get path to symsync config file."""

from pathlib import Path

from ...constants import CONFIG_FILE_NAME
from .get_home_dir import get_home_dir


def get_config_path() -> Path:
    """Get path to symsync config file."""
    return get_home_dir(CONFIG_FILE_NAME)
