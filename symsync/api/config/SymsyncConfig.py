"""Top-level symsync configuration."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import DEFAULT_LINKS_FILE, DEFAULT_ROOT
from .ConfigurationError import ConfigurationError
from .get_config_path import get_config_path
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig


class SymsyncConfig(BaseModel):
    """Configuration for link reconciliation.

    ``links_file`` resolves against the current working directory and
    ``root`` against the directory that holds the links file.
    """

    model_config = ConfigDict(extra="forbid")

    links_file: str = Field(DEFAULT_LINKS_FILE, description="Desired link list, one 'source target' per line")
    root: str = Field(DEFAULT_ROOT, description="Root directory whose root/*/* leaves are reconciled")
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get symsync home directory based on SYMSYNC_HOME or default to ~/.symsync."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file under the symsync home directory."""
        return get_config_path()

    @classmethod
    def load(cls) -> "SymsyncConfig":
        """Load and validate config from file.

        A missing config file is not an error: every field has a default.

        Raises:
            ConfigurationError: If the file is unreadable, invalid JSON, or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e.strerror}") from e

        if not isinstance(raw, dict):
            raise ConfigurationError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigurationError(f"Configuration validation error in {path}: {detail}") from e
