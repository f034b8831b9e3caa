"""Shared constants for symsync home directory and default file locations."""

SYMSYNC_HOME_EXT = ".symsync"  # user-level state/config directory name

SYMSYNC_HOME_ENV = "SYMSYNC_HOME"

CONFIG_FILE_NAME = "config.json"

LOG_FILE_NAME = "symsync.log"

DEFAULT_LINKS_FILE = "symlinks.list"

# Relative to the directory holding the links file
DEFAULT_ROOT = "../Moka"
