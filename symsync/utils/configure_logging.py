import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILE_NAME

# Prevent multiple handler registration
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str | int | None = None) -> None:
    """Configure unified symsync logging.

    Handlers are attached once; a later call only re-applies ``level``.

    Args:
        home: symsync home directory. If None, derived from environment.
        level: Logging level name or number for the ``symsync`` logger.

    Raises:
        ConfigurationError: If the log file cannot be opened. This is raised
            on the first attempt only; later records go to stderr through
            ``logging.lastResort``.
    """
    global _CONFIGURED

    root_logger = logging.getLogger("symsync")

    if not _CONFIGURED:
        _CONFIGURED = True
        if home is None:
            from ..api.config.get_home_dir import get_home_dir

            home = get_home_dir()

        log_file = home / LOG_FILE_NAME
        root_logger.setLevel(logging.INFO)

        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

        try:
            home.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=5 * 1024 * 1024,
                backupCount=3,  # 5MB * 3
                encoding="utf-8",
            )
        except OSError as e:
            from ..api.config.ConfigurationError import ConfigurationError

            raise ConfigurationError(f"Cannot open log file {log_file}: {e.strerror or e}") from e
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if level is not None:
        root_logger.setLevel(level)
