"""Display utilities for the CLI."""

from .CLIDisplay import CLIDisplay
from .Display import Display
from .DisplayContext import DisplayContext, display_context

__all__ = ["CLIDisplay", "Display", "DisplayContext", "display_context"]
