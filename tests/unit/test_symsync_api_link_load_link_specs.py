"""Unit tests for symsync.api.link.load_link_specs."""

import pytest

from symsync.api.config.ConfigurationError import ConfigurationError
from symsync.api.link.LinkSpec import LinkSpec
from symsync.api.link.load_link_specs import load_link_specs


def test_loads_pairs_sorted(workspace):
    workspace.write_links("foo.conf foo", "bar.conf\tbar", "a.conf    a")

    specs = load_link_specs(workspace.links_file)

    assert specs == [
        LinkSpec("a.conf", "a"),
        LinkSpec("bar.conf", "bar"),
        LinkSpec("foo.conf", "foo"),
    ]


def test_duplicate_lines_collapse(workspace):
    workspace.write_links("foo.conf foo", "foo.conf foo", "foo.conf  foo")

    assert load_link_specs(workspace.links_file) == [LinkSpec("foo.conf", "foo")]


def test_missing_final_newline_is_accepted(workspace):
    workspace.write_links("foo.conf foo", "bar.conf bar", trailing_newline=False)

    assert len(load_link_specs(workspace.links_file)) == 2


def test_empty_file_yields_no_specs(workspace):
    workspace.links_file.write_text("")

    assert load_link_specs(workspace.links_file) == []


@pytest.mark.parametrize(
    "line",
    [
        "foo.conf",
        "foo.conf foo extra",
        " foo.conf foo",
        "foo.conf foo ",
        "foo.conf foo\r",
        "",
        "   ",
    ],
)
def test_malformed_line_rejects_whole_file(workspace, line):
    workspace.write_links("good.conf good", line, "other.conf other")

    with pytest.raises(ConfigurationError) as exc_info:
        load_link_specs(workspace.links_file)

    message = str(exc_info.value)
    assert "Invalid format" in message
    assert "line 2" in message


@pytest.mark.parametrize(
    "content, bad_lines",
    [
        (b"a.conf a\r\nb.conf b\r\n", "line 1, 2"),
        (b"a.conf a\rb.conf b\n", "line 1"),
        (b"a.conf a\nb.conf b\r\n", "line 2"),
    ],
)
def test_carriage_returns_are_not_line_breaks(workspace, content, bad_lines):
    workspace.links_file.write_bytes(content)

    with pytest.raises(ConfigurationError, match=bad_lines):
        load_link_specs(workspace.links_file)


def test_malformed_message_lists_every_bad_line(workspace):
    workspace.write_links("one", "good.conf good", "three fields here")

    with pytest.raises(ConfigurationError, match="line 1, 3"):
        load_link_specs(workspace.links_file)


def test_missing_file(tmp_path):
    path = tmp_path / "absent.list"

    with pytest.raises(ConfigurationError, match="does not exist"):
        load_link_specs(path)


def test_directory_is_not_a_links_file(tmp_path):
    with pytest.raises(ConfigurationError, match="does not exist or is not accessible"):
        load_link_specs(tmp_path)


def test_invalid_utf8(workspace):
    workspace.links_file.write_bytes(b"foo\xff.conf foo\n")

    with pytest.raises(ConfigurationError, match="not valid UTF-8"):
        load_link_specs(workspace.links_file)


def test_unreadable_file(workspace, monkeypatch):
    workspace.write_links("foo.conf foo")

    def deny(*args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(type(workspace.links_file), "read_bytes", deny)

    with pytest.raises(ConfigurationError, match="Permission denied"):
        load_link_specs(workspace.links_file)


def test_duplicate_target_with_different_sources_is_rejected(workspace):
    workspace.write_links("old.conf app", "new.conf app", "foo.conf foo")

    with pytest.raises(ConfigurationError) as exc_info:
        load_link_specs(workspace.links_file)

    assert "Duplicate targets" in str(exc_info.value)
    assert "app <- new.conf, old.conf" in str(exc_info.value)
