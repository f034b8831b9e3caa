"""Link sync API command.

CLI: symsync sync [--dry-run] [--root PATH] [--links-file PATH]
"""

from collections.abc import Iterator
from pathlib import Path

from ...utils.get_logger import get_logger
from .._output_schemas.link import LinkSyncOutput
from ..config.ConfigurationError import ConfigurationError
from ..StageResult import StageResult
from .ActionOutcome import ActionOutcome
from .find_subdirectories import find_subdirectories
from .load_link_specs import load_link_specs
from .plan_reconcile import plan_reconcile
from .reconcile import reconcile
from .resolve_paths import resolve_paths
from .ScanError import ScanError
from .SubdirectoryResult import SubdirectoryResult


def _failure_output(dry_run: bool, root: str, links_file: str, message: str) -> dict:
    return LinkSyncOutput(
        errors=[message],
        warnings=[],
        dry_run=dry_run,
        root=root,
        links_file=links_file,
        desired_count=0,
        subdirectory_count=0,
        removed_count=0,
        created_count=0,
        skipped_count=0,
        failed_count=0,
        subdirectories=[],
    ).model_dump(mode="python")


def cmd_sync(
    dry_run: bool = False,
    root: str | Path | None = None,
    links_file: str | Path | None = None,
) -> StageResult:
    """Make the links in every root/*/* subdirectory match the links file.

    Removals across all subdirectories happen before any creation. Failures
    of individual actions, and directories that cannot be scanned, are
    reported and do not fail the command.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        root_str = ""
        links_str = ""
        try:
            yield (0.05, "Resolving paths...")
            paths = resolve_paths(root=root, links_file=links_file)
            root_str, links_str = str(paths.root), str(paths.links_file)
            root_dir = paths.require_root()

            yield (0.1, f"Loading {paths.links_file}...")
            desired = load_link_specs(paths.links_file)

            yield (0.15, f"Scanning {root_dir}...")
            unlisted: list[ScanError] = []
            subdirectories = find_subdirectories(root_dir, on_error=unlisted.append)
            plan = plan_reconcile(desired, subdirectories)
            plan.scan_errors[:0] = unlisted
        except ConfigurationError as e:
            get_logger("link.cmd_sync").error(str(e))
            result_obj.output = _failure_output(dry_run, root_str, links_str, str(e))
            result_obj.result = f"Error: {e}"
            result_obj.success = False
            return

        for error in plan.scan_errors:
            yield (0.2, str(error))

        total = max(len(plan.removals) + len(plan.creations), 1)
        outcomes: list[ActionOutcome] = []
        for outcome in reconcile(plan, dry_run=dry_run):
            outcomes.append(outcome)
            yield (0.2 + 0.75 * min(len(outcomes) / total, 1.0), outcome.message(dry_run=dry_run))

        results = SubdirectoryResult.group(plan.subdirectories, outcomes, plan.scan_errors)
        removed = sum(r.removed for r in results)
        created = sum(r.created for r in results)
        skipped = sum(r.skipped for r in results)
        failed = sum(r.failed for r in results) + len(plan.scan_errors)
        warnings = [str(e) for e in plan.scan_errors] + [str(o.error) for o in outcomes if o.error is not None]

        yield (1.0, "Complete")
        result_obj.output = LinkSyncOutput(
            errors=[],
            warnings=warnings,
            dry_run=dry_run,
            root=root_str,
            links_file=links_str,
            desired_count=len(desired),
            subdirectory_count=len(plan.subdirectories),
            removed_count=removed,
            created_count=created,
            skipped_count=skipped,
            failed_count=failed,
            subdirectories=[r.to_dict() for r in results if r.reportable],
        ).model_dump(mode="python")

        prefix = "Dry run: would remove" if dry_run else "Removed"
        verb = "create" if dry_run else "created"
        summary = f"{prefix} {removed} and {verb} {created} symlinks across {len(plan.subdirectories)} subdirectories"
        if failed:
            summary += f" ({failed} failed)"
        result_obj.result = summary
        result_obj.success = True

    announce = "Running in dry-run mode. No changes will be made." if dry_run else "Synchronizing symlinks..."
    return StageResult(
        announce=announce,
        progress_callback=do_work,
    )
