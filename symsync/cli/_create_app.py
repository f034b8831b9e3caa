"""Create the main Typer CLI app."""

import typer

from symsync.api.link.cmd_check import cmd_check
from symsync.api.link.cmd_status import cmd_status
from symsync.api.link.cmd_sync import cmd_sync
from symsync.cli._handle_stage_result import _handle_stage_result


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        name="symsync",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Reconcile declared symlinks across root/*/* subdirectories",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
        add_completion=False,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Store display format in context for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    @app.command(name="sync")
    def sync_cmd(
        ctx: typer.Context,
        dry_run: bool = typer.Option(False, "--dry-run", help="Report the changes without modifying any symlinks"),
        root: str | None = typer.Option(None, "--root", help="Root directory whose root/*/* leaves are reconciled"),
        links_file: str | None = typer.Option(None, "--links-file", help="File listing 'source target' pairs"),
    ) -> None:
        """Create missing and remove stale symlinks in every subdirectory."""
        _handle_stage_result(cmd_sync, ctx)(dry_run=dry_run, root=root, links_file=links_file)

    @app.command(name="status")
    def status_cmd(
        ctx: typer.Context,
        root: str | None = typer.Option(None, "--root", help="Root directory whose root/*/* leaves are reconciled"),
        links_file: str | None = typer.Option(None, "--links-file", help="File listing 'source target' pairs"),
    ) -> None:
        """Show which subdirectories a sync would change."""
        _handle_stage_result(cmd_status, ctx)(root=root, links_file=links_file)

    @app.command(name="check")
    def check_cmd(
        ctx: typer.Context,
        links_file: str | None = typer.Option(None, "--links-file", help="File listing 'source target' pairs"),
    ) -> None:
        """Validate the links file."""
        _handle_stage_result(cmd_check, ctx)(links_file=links_file)

    return app
