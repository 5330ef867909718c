"""Command line entry point for doclinks."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit status."""
    import typer

    from doclinks import __version__
    from doclinks.cli._create_app import _create_app

    args = sys.argv[1:] if argv is None else argv
    if "--version" in args or "-v" in args:
        print(f"doclinks {__version__}")
        return 0

    try:
        _create_app()(args)
    except SystemExit as e:
        # Commands exit through sys.exit with their status
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
    return 0
