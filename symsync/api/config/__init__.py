"""Configuration API domain."""

from .ConfigurationError import ConfigurationError
from .LogConfig import LogConfig
from .SymsyncConfig import SymsyncConfig

__all__ = ["ConfigurationError", "LogConfig", "SymsyncConfig"]
