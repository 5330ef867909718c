"""Create the main Typer CLI app."""

from pathlib import Path

import typer

from doclinks.api.config.DocLinksConfig import DocLinksConfig
from doclinks.cli.link import link
from doclinks.utils.logger import configure_logging


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="doclinks CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(link(), name="link")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        try:
            log_config = DocLinksConfig.load().log
        except ValueError:
            # Commands report config errors through their own output
            log_config = DocLinksConfig().log
        configure_logging(log_config.level, Path(log_config.file).expanduser() if log_config.file else None)

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
