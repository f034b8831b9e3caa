"""Unit tests for symsync.api.link.resolve_paths."""

import pytest

from symsync.api.config.ConfigurationError import ConfigurationError
from symsync.api.link.LinkPaths import LinkPaths
from symsync.api.link.resolve_paths import resolve_paths


def test_defaults_resolve_against_cwd_and_links_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    paths = resolve_paths()

    assert paths.links_file == tmp_path / "symlinks.list"
    assert paths.root == tmp_path.parent / "Moka"


def test_config_root_relative_to_links_file(tmp_path, write_config):
    write_config({"links_file": str(tmp_path / "scripts" / "symlinks.list"), "root": "../themes"})

    paths = resolve_paths()

    assert paths.root == tmp_path / "themes"


def test_explicit_arguments_override_config(tmp_path, write_config, monkeypatch):
    write_config({"links_file": "/elsewhere/symlinks.list", "root": "/elsewhere/root"})
    monkeypatch.chdir(tmp_path)

    paths = resolve_paths(root="roots", links_file="lists/my.list")

    assert paths == LinkPaths(root=tmp_path / "roots", links_file=tmp_path / "lists" / "my.list")


def test_home_expansion(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    paths = resolve_paths(root="~/Moka", links_file="~/symlinks.list")

    assert paths.root == tmp_path / "Moka"
    assert paths.links_file == tmp_path / "symlinks.list"


def test_require_root(tmp_path):
    assert LinkPaths(root=tmp_path, links_file=tmp_path / "x").require_root() == tmp_path

    (tmp_path / "file").write_text("")
    with pytest.raises(ConfigurationError, match="does not exist or is not accessible"):
        LinkPaths(root=tmp_path / "file", links_file=tmp_path / "x").require_root()
