"""Output schemas for API commands.

Importing this package registers every schema with the registry.
"""

from . import config, link
from ._registry import get_output_schema, register_output_schema

__all__ = ["config", "get_output_schema", "link", "register_output_schema"]
