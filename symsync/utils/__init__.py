"""symsync utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .configure_logging import configure_logging
from .expand_path import expand_path
from .get_logger import get_logger

__all__ = ["configure_logging", "expand_path", "get_logger"]
