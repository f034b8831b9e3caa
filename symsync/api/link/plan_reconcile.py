"""Diff desired links against observed links per subdirectory."""

from collections.abc import Iterable
from pathlib import Path

from ...utils.get_logger import get_logger
from .LinkAction import ActionKind, LinkAction
from .LinkSpec import LinkSpec
from .ReconcilePlan import ReconcilePlan
from .scan_links import scan_links
from .ScanError import ScanError


def _chain_depths(desired: set[LinkSpec]) -> dict[LinkSpec, int]:
    """How many desired links each spec's source reaches through before a plain name.

    ``b.png a.png`` sourced from the target of ``c.png b.png`` has depth 1.
    Cycles stop at the first repeated spec.
    """
    by_target = {spec.target: spec for spec in desired}
    depths: dict[LinkSpec, int] = {}

    def depth(spec: LinkSpec, seen: frozenset[LinkSpec]) -> int:
        if spec not in depths:
            upstream = by_target.get(spec.source)
            if upstream is None or upstream in seen:
                depths[spec] = 0
            else:
                depths[spec] = depth(upstream, seen | {upstream}) + 1
        return depths[spec]

    for spec in desired:
        depth(spec, frozenset({spec}))
    return depths


def plan_reconcile(desired: Iterable[LinkSpec], subdirectories: Iterable[Path]) -> ReconcilePlan:
    """Compute removals and creation candidates for every subdirectory.

    Pairs observed but not desired become removals, whether or not their
    source exists. Pairs desired but not observed become creation
    candidates; whether they are realized is decided when applied. A
    creation whose source is another desired link comes after that link.

    A subdirectory that cannot be scanned gets no actions and is recorded
    in ``scan_errors``.
    """
    desired_set = set(desired)
    depths = _chain_depths(desired_set)
    plan = ReconcilePlan()

    for directory in subdirectories:
        plan.subdirectories.append(directory)
        try:
            observed = {link.spec for link in scan_links(directory)}
        except OSError as e:
            error = ScanError(directory, e)
            get_logger("link.plan_reconcile").warning(str(error))
            plan.scan_errors.append(error)
            continue

        for spec in sorted(observed - desired_set):
            plan.removals.append(LinkAction(ActionKind.REMOVE, spec, directory))
        for spec in sorted(desired_set - observed, key=lambda s: (depths[s], s)):
            plan.creations.append(LinkAction(ActionKind.CREATE, spec, directory))

    return plan
