"""Load and validate the desired link list."""

import re
from pathlib import Path

from ...utils.get_logger import get_logger
from ..config.ConfigurationError import ConfigurationError
from .LinkSpec import LinkSpec

_LINE_PATTERN = re.compile(r"(\S+)\s+(\S+)")


def _read_lines(path: Path) -> list[str]:
    if not path.is_file():
        raise ConfigurationError(f"The file {path} does not exist or is not accessible.")
    try:
        # Decoded without newline translation so a stray "\r" stays in the record
        text = path.read_bytes().decode("utf-8")
    except OSError as e:
        raise ConfigurationError(f"The file {path} cannot be read: {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"The file {path} is not valid UTF-8: {e.reason}") from e

    # Only "\n" separates records; a final newline does not open an empty record
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def load_link_specs(path: Path) -> list[LinkSpec]:
    """Parse ``path`` into unique LinkSpecs, sorted.

    Each line must be exactly ``<source><whitespace><target>``. Any other
    line, including a blank one, rejects the whole file.

    Raises:
        ConfigurationError: If the file is missing, unreadable, malformed,
            or declares one target with two different sources.
    """
    specs: set[LinkSpec] = set()
    bad_lines: list[int] = []

    for number, line in enumerate(_read_lines(path), start=1):
        match = _LINE_PATTERN.fullmatch(line)
        if match is None:
            bad_lines.append(number)
            continue
        specs.add(LinkSpec(source=match.group(1), target=match.group(2)))

    if bad_lines:
        shown = ", ".join(str(n) for n in bad_lines[:10])
        more = f" (and {len(bad_lines) - 10} more)" if len(bad_lines) > 10 else ""
        raise ConfigurationError(
            f"Invalid format in {path} at line {shown}{more}. Each line should contain exactly two columns."
        )

    sources_by_target: dict[str, list[str]] = {}
    for spec in sorted(specs):
        sources_by_target.setdefault(spec.target, []).append(spec.source)
    conflicts = {target: sources for target, sources in sources_by_target.items() if len(sources) > 1}
    if conflicts:
        detail = "; ".join(f"{target} <- {', '.join(sources)}" for target, sources in sorted(conflicts.items()))
        raise ConfigurationError(f"Duplicate targets in {path}: {detail}")

    get_logger("link.load_link_specs").debug(f"Loaded {len(specs)} link specs from {path}")
    return sorted(specs)
