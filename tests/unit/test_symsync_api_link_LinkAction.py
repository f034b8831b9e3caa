"""Unit tests for link result types: LinkAction, ActionOutcome, SubdirectoryResult."""

from pathlib import Path

from symsync.api.link.ActionOutcome import ActionOutcome, OutcomeStatus
from symsync.api.link.LinkAction import ActionKind, LinkAction
from symsync.api.link.LinkSpec import LinkSpec
from symsync.api.link.OperationError import OperationError
from symsync.api.link.SubdirectoryResult import SubdirectoryResult

LEAF = Path("/r/a/x")
SPEC = LinkSpec("foo.conf", "foo")


def test_describe():
    create = LinkAction(ActionKind.CREATE, SPEC, LEAF)
    remove = LinkAction(ActionKind.REMOVE, SPEC, LEAF)

    assert create.describe() == "Created symlink foo -> foo.conf in /r/a/x"
    assert create.describe(dry_run=True) == "Dry run: creating symlink foo -> foo.conf in /r/a/x"
    assert remove.describe() == "Removed symlink foo -> foo.conf from /r/a/x"
    assert remove.describe(dry_run=True) == "Dry run: removing symlink foo -> foo.conf from /r/a/x"
    assert create.link_path == LEAF / "foo"
    assert create.source_path == LEAF / "foo.conf"


def test_operation_error_message_and_cause():
    cause = PermissionError(13, "Permission denied")
    error = OperationError(LinkAction(ActionKind.REMOVE, SPEC, LEAF), cause)

    assert str(error) == "Failed to remove symlink foo from /r/a/x: Permission denied"
    assert error.cause is cause


def test_skipped_outcome_message():
    outcome = ActionOutcome(LinkAction(ActionKind.CREATE, SPEC, LEAF), OutcomeStatus.SKIPPED, reason="foo already exists")

    assert outcome.message() == "Skipped creating symlink foo -> foo.conf in /r/a/x: foo already exists"
    assert outcome.is_change is False
    assert outcome.to_dict() == {
        "action": "create",
        "target": "foo",
        "source": "foo.conf",
        "status": "skipped",
        "reason": "foo already exists",
    }


def test_group_keeps_directory_order_and_counts():
    other = Path("/r/a/y")
    outcomes = [
        ActionOutcome(LinkAction(ActionKind.REMOVE, LinkSpec("baz.conf", "baz"), other), OutcomeStatus.APPLIED),
        ActionOutcome(LinkAction(ActionKind.CREATE, SPEC, LEAF), OutcomeStatus.SIMULATED),
        ActionOutcome(LinkAction(ActionKind.CREATE, SPEC, other), OutcomeStatus.SKIPPED, reason="taken"),
    ]

    results = SubdirectoryResult.group([LEAF, other, Path("/r/b/z")], outcomes)

    assert [r.directory for r in results] == [LEAF, other, Path("/r/b/z")]
    assert (results[0].created, results[0].removed) == (1, 0)
    assert (results[1].removed, results[1].skipped, results[1].failed) == (1, 1, 0)
    assert results[2].outcomes == []
    assert results[1].to_dict()["directory"] == "/r/a/y"
