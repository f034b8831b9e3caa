"""CLI - main entry point."""

import sys

_VERSION_FLAGS = ("--version", "-v")
_DISPLAY_FLAGS = ("--display", "-d")


def _version_requested(argv: list[str]) -> bool:
    """True when a version flag appears among the global options."""
    args = iter(argv)
    for arg in args:
        if arg in _VERSION_FLAGS:
            return True
        if arg in _DISPLAY_FLAGS:
            next(args, None)
        elif not arg.startswith("-"):
            # First subcommand; everything after belongs to it
            return False
    return False


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from symsync.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if _version_requested(argv):
        from symsync.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"symsync {result.output.get('version', 'unknown')}")
        return 0 if result.success else 1

    app = _create_app()
    try:
        # Standalone mode reports usage errors itself and exits 2
        app(argv, prog_name="symsync", standalone_mode=True)
    except SystemExit as e:
        # Commands exit with their StageResult status
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
