"""Fatal configuration error raised before any filesystem mutation."""


class ConfigurationError(ValueError):
    """Root directory, links file or configuration file is missing or invalid."""
