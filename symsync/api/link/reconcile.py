"""Apply a ReconcilePlan: every removal first, then every creation."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.get_logger import get_logger
from .ActionOutcome import ActionOutcome, OutcomeStatus
from .create_link import create_link
from .LinkAction import LinkAction
from .OperationError import OperationError
from .ReconcilePlan import ReconcilePlan
from .remove_link import remove_link


def _remove(action: LinkAction, dry_run: bool) -> ActionOutcome | None:
    if dry_run:
        return ActionOutcome(action, OutcomeStatus.SIMULATED) if action.link_path.is_symlink() else None
    try:
        removed = remove_link(action)
    except OperationError as e:
        return ActionOutcome(action, OutcomeStatus.FAILED, error=e)
    return ActionOutcome(action, OutcomeStatus.APPLIED) if removed else None


def _source_available(action: LinkAction, dry_run: bool, vacated: set[Path], provided: set[Path]) -> bool:
    source = action.source_path
    # In a dry run links are neither removed nor created; answer as a real run would
    if dry_run and source in provided:
        return True
    if dry_run and source in vacated:
        return False
    return source.is_file()


def _create(action: LinkAction, dry_run: bool, vacated: set[Path], provided: set[Path]) -> ActionOutcome | None:
    if not _source_available(action, dry_run, vacated, provided):
        return None
    link_path = action.link_path
    # In a dry run removals did not happen; their names count as free
    taken = link_path.is_symlink() or link_path.exists()
    if taken and not (dry_run and link_path in vacated):
        return ActionOutcome(action, OutcomeStatus.SKIPPED, reason=f"{action.spec.target} already exists")
    if dry_run:
        return ActionOutcome(action, OutcomeStatus.SIMULATED)
    try:
        create_link(action)
    except OperationError as e:
        return ActionOutcome(action, OutcomeStatus.FAILED, error=e)
    return ActionOutcome(action, OutcomeStatus.APPLIED)


def _log(outcome: ActionOutcome, dry_run: bool) -> None:
    logger = get_logger("link.reconcile")
    message = outcome.message(dry_run=dry_run)
    if outcome.status is OutcomeStatus.FAILED:
        logger.warning(message)
    elif outcome.status is OutcomeStatus.APPLIED:
        logger.info(message)
    else:
        logger.debug(message)


def reconcile(plan: ReconcilePlan, dry_run: bool = False) -> Iterator[ActionOutcome]:
    """Apply ``plan`` and yield one outcome per action that did something.

    All removals across all subdirectories complete before the first
    creation. Creations run in plan order, so a link whose source is
    another planned link finds it in place. Removals of links that are
    already gone and creations whose source file is absent are silent
    no-ops. A failing action yields a FAILED outcome and processing
    continues.
    """
    vacated: set[Path] = set()
    provided: set[Path] = set()

    for action in plan.removals:
        outcome = _remove(action, dry_run)
        if outcome is None:
            continue
        if outcome.is_change:
            vacated.add(action.link_path)
        _log(outcome, dry_run)
        yield outcome

    for action in plan.creations:
        outcome = _create(action, dry_run, vacated, provided)
        if outcome is None:
            continue
        if outcome.is_change:
            provided.add(action.link_path)
        _log(outcome, dry_run)
        yield outcome
