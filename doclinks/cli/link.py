"""Link Typer app factory."""

import typer

from doclinks.api.link.cmd_collect import cmd_collect
from doclinks.api.link.cmd_rewrite import cmd_rewrite
from doclinks.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Rewrite library symbol links in book chapters",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="collect")
    def collect_cmd(
        ctx: typer.Context,
        book_dir: str = typer.Argument(..., help="Book source directory"),
    ) -> None:
        """List candidate symbol links per chapter without resolving them."""
        _handle_stage_result(cmd_collect, ctx)(book_dir=book_dir)

    @app.command(name="rewrite")
    def rewrite_cmd(
        ctx: typer.Context,
        book_dir: str = typer.Argument(..., help="Book source directory"),
        out_dir: str | None = typer.Option(None, "--out", "-o", help="Write chapters here instead of in place"),
        dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Resolve links but write nothing"),
        absolute: bool = typer.Option(False, "--absolute", help="Keep absolute documentation URLs"),
        config_path: str | None = typer.Option(None, "--config", "-c", help="Config file to load"),
    ) -> None:
        """Resolve symbol links with rustdoc and rewrite them as inline links."""
        _handle_stage_result(cmd_rewrite, ctx)(
            book_dir=book_dir,
            out_dir=out_dir,
            dry_run=dry_run,
            absolute=absolute,
            config_path=config_path,
        )

    return app
