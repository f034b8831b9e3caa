"""Shared pytest configuration and fixtures for all tests."""

import json
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: tests that drive the CLI end to end")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Layout Helpers
# =============================================================================


class Symlink(NamedTuple):
    """Marker for a symlink entry in a tree spec."""

    source: str


DIR = object()


def build_tree(root: Path, tree: dict[str, dict[str, object]]) -> Path:
    """Create leaf directories under ``root`` and populate them.

    ``tree`` maps a relative directory ("mid/leaf") to its entries: a string
    value becomes a regular file with that content, a Symlink becomes a
    symbolic link, DIR becomes a directory.
    """
    for rel, entries in tree.items():
        directory = root / rel
        directory.mkdir(parents=True, exist_ok=True)
        for name, value in entries.items():
            path = directory / name
            if isinstance(value, Symlink):
                os.symlink(value.source, path)
            elif value is DIR:
                path.mkdir()
            else:
                path.write_text(str(value))
    return root


def links_in(directory: Path) -> dict[str, str]:
    """Map link name to link text for every symlink directly in ``directory``."""
    return {p.name: os.readlink(p) for p in sorted(directory.iterdir()) if p.is_symlink()}


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@dataclass
class Workspace:
    """A links file in ``<base>/scripts`` next to a ``<base>/Moka`` root."""

    base: Path
    root: Path
    links_file: Path

    def write_links(self, *lines: str, trailing_newline: bool = True) -> Path:
        text = "\n".join(lines)
        if lines and trailing_newline:
            text += "\n"
        self.links_file.write_text(text, encoding="utf-8")
        return self.links_file

    def build(self, tree: dict[str, dict[str, object]]) -> Path:
        return build_tree(self.root, tree)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def symsync_home(tmp_path_factory, monkeypatch) -> Path:
    """Point SYMSYNC_HOME at an empty directory so no user config or log is touched."""
    home = tmp_path_factory.mktemp("symsync_home")
    monkeypatch.setenv("SYMSYNC_HOME", str(home))
    return home


@pytest.fixture
def write_config(symsync_home: Path) -> Callable[[dict], Path]:
    """Write ``config.json`` into the symsync home directory."""

    def _write(data: dict) -> Path:
        path = symsync_home / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    scripts = tmp_path / "scripts"
    scripts.mkdir()
    root = tmp_path / "Moka"
    root.mkdir()
    return Workspace(base=tmp_path, root=root, links_file=scripts / "symlinks.list")


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    return run_cmd


@pytest.fixture(name="links_in")
def links_in_fixture():
    return links_in


@pytest.fixture
def deny_listing(monkeypatch) -> Callable[..., None]:
    """Make ``Path.iterdir`` fail with EACCES for the given directories.

    Permission bits do not stop root, so listing failures are injected.
    """

    def _deny(*directories: Path) -> None:
        denied = set(directories)
        original = Path.iterdir

        def iterdir(self):
            if self in denied:
                raise PermissionError(13, "Permission denied", str(self))
            return original(self)

        monkeypatch.setattr(Path, "iterdir", iterdir)

    return _deny
