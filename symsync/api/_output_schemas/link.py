"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkSyncOutput(BaseOutputSchema):
    """Output schema for link sync command.

    Output structure:
    - dry_run: bool - true when no filesystem mutation was performed
    - root / links_file: str - resolved paths, empty string if resolution failed
    - desired_count: int - number of unique pairs in the links file
    - subdirectory_count: int - number of leaf subdirectories in scope
    - removed_count / created_count: int - actions applied (or simulated)
    - skipped_count: int - creations skipped because the target name was taken
    - failed_count: int - actions that raised an OperationError plus directories that could not be scanned
    - subdirectories: list[dict] - per-subdirectory records, only those with outcomes
    """

    dry_run: bool = Field(..., description="True when actions were only simulated")
    root: str = Field(..., description="Resolved root directory")
    links_file: str = Field(..., description="Resolved links file")
    desired_count: int = Field(..., description="Number of desired link pairs")
    subdirectory_count: int = Field(..., description="Number of leaf subdirectories in scope")
    removed_count: int = Field(..., description="Links removed (or that would be removed)")
    created_count: int = Field(..., description="Links created (or that would be created)")
    skipped_count: int = Field(..., description="Creations skipped because the target exists")
    failed_count: int = Field(..., description="Actions or directory scans that failed")
    subdirectories: list[dict[str, Any]] = Field(..., description="Per-subdirectory outcome records")


class LinkStatusOutput(BaseOutputSchema):
    """Output schema for link status command."""

    root: str = Field(..., description="Resolved root directory")
    links_file: str = Field(..., description="Resolved links file")
    desired_count: int = Field(..., description="Number of desired link pairs")
    subdirectory_count: int = Field(..., description="Number of leaf subdirectories in scope")
    pending_removals: int = Field(..., description="Links a sync would remove")
    pending_creations: int = Field(..., description="Links a sync would create")
    in_sync: bool = Field(..., description="True when a sync would change nothing")
    drift: list[dict[str, Any]] = Field(..., description="Per-subdirectory pending changes")


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for link check command."""

    links_file: str = Field(..., description="Resolved links file")
    link_count: int = Field(..., description="Number of unique link pairs")
    links: list[dict[str, str]] = Field(..., description="Pairs as {source, target}, sorted")


register_output_schema("link", "sync", LinkSyncOutput)
register_output_schema("link", "status", LinkStatusOutput)
register_output_schema("link", "check", LinkCheckOutput)
