"""Link check API command.

CLI: symsync check [--links-file PATH]
"""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkCheckOutput
from ..config.ConfigurationError import ConfigurationError
from ..StageResult import StageResult
from .load_link_specs import load_link_specs
from .resolve_paths import resolve_paths


def cmd_check(links_file: str | Path | None = None) -> StageResult:
    """Validate the links file without looking at the root directory."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        links_str = ""
        try:
            yield (0.2, "Resolving paths...")
            paths = resolve_paths(links_file=links_file)
            links_str = str(paths.links_file)

            yield (0.6, f"Validating {paths.links_file}...")
            specs = load_link_specs(paths.links_file)
        except ConfigurationError as e:
            result_obj.output = LinkCheckOutput(
                errors=[str(e)], warnings=[], links_file=links_str, link_count=0, links=[]
            ).model_dump(mode="python")
            result_obj.result = f"Error: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = LinkCheckOutput(
            errors=[],
            warnings=[],
            links_file=links_str,
            link_count=len(specs),
            links=[spec.to_dict() for spec in specs],
        ).model_dump(mode="python")
        result_obj.result = f"{links_str} is valid ({len(specs)} links)"
        result_obj.success = True

    return StageResult(
        announce="Validating links file...",
        progress_callback=do_work,
    )
