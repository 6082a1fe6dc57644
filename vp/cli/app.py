from __future__ import annotations

import typer

from vp import __version__
from vp.cli.commands.channel_image import channel_app
from vp.cli.commands.release_image import release_app
from vp.cli.context import GlobalOptions


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Sub-apps
app.add_typer(channel_app, name="channel")
app.add_typer(release_app, name="release")


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    app_option: str | None = typer.Option(
        None,
        "--app",
        help="App slug or ID (overrides VP_APP and the config file)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)

    ctx.obj = GlobalOptions(app=app_option)


def main() -> None:
    app()
