"""Link status API command.

CLI: symsync status [--root PATH] [--links-file PATH]
"""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkStatusOutput
from ..config.ConfigurationError import ConfigurationError
from ..StageResult import StageResult
from .ActionOutcome import OutcomeStatus
from .find_subdirectories import find_subdirectories
from .LinkAction import ActionKind
from .load_link_specs import load_link_specs
from .plan_reconcile import plan_reconcile
from .reconcile import reconcile
from .resolve_paths import resolve_paths
from .ScanError import ScanError
from .SubdirectoryResult import SubdirectoryResult


def cmd_status(root: str | Path | None = None, links_file: str | Path | None = None) -> StageResult:
    """Report the changes a sync would make, without making them."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        root_str = ""
        links_str = ""
        try:
            yield (0.1, "Resolving paths...")
            paths = resolve_paths(root=root, links_file=links_file)
            root_str, links_str = str(paths.root), str(paths.links_file)
            root_dir = paths.require_root()

            yield (0.3, f"Loading {paths.links_file}...")
            desired = load_link_specs(paths.links_file)

            yield (0.5, f"Scanning {root_dir}...")
            unlisted: list[ScanError] = []
            plan = plan_reconcile(desired, find_subdirectories(root_dir, on_error=unlisted.append))
            plan.scan_errors[:0] = unlisted
        except ConfigurationError as e:
            result_obj.output = LinkStatusOutput(
                errors=[str(e)],
                warnings=[],
                root=root_str,
                links_file=links_str,
                desired_count=0,
                subdirectory_count=0,
                pending_removals=0,
                pending_creations=0,
                in_sync=False,
                drift=[],
            ).model_dump(mode="python")
            result_obj.result = f"Error: {e}"
            result_obj.success = False
            return

        for error in plan.scan_errors:
            yield (0.6, str(error))

        yield (0.8, "Comparing desired and observed links...")
        outcomes = [o for o in reconcile(plan, dry_run=True) if o.status is OutcomeStatus.SIMULATED]
        drift = []
        for result in SubdirectoryResult.group(plan.subdirectories, outcomes):
            if not result.outcomes:
                continue
            drift.append(
                {
                    "directory": str(result.directory),
                    "remove": [str(o.action.spec) for o in result.outcomes if o.action.kind is ActionKind.REMOVE],
                    "create": [str(o.action.spec) for o in result.outcomes if o.action.kind is ActionKind.CREATE],
                }
            )
        removals = sum(len(d["remove"]) for d in drift)
        creations = sum(len(d["create"]) for d in drift)
        warnings = [str(e) for e in plan.scan_errors]

        yield (1.0, "Complete")
        result_obj.output = LinkStatusOutput(
            errors=[],
            warnings=warnings,
            root=root_str,
            links_file=links_str,
            desired_count=len(desired),
            subdirectory_count=len(plan.subdirectories),
            pending_removals=removals,
            pending_creations=creations,
            in_sync=not drift and not warnings,
            drift=drift,
        ).model_dump(mode="python")
        if drift:
            result_obj.result = f"{len(drift)} subdirectories out of sync ({removals} to remove, {creations} to create)"
        elif warnings:
            result_obj.result = "No pending changes in the subdirectories that could be scanned"
        else:
            result_obj.result = f"All {len(plan.subdirectories)} subdirectories in sync"
        if warnings:
            result_obj.result += f" ({len(warnings)} could not be scanned)"
        result_obj.success = True

    return StageResult(
        announce="Checking symlink status...",
        progress_callback=do_work,
    )
