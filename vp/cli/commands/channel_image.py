"""``vp channel image ls``."""

from __future__ import annotations

import typer

from vp.cli.commands._helpers import (
    exit_on_image_error,
    finish_image_listing,
    require_channel,
)
from vp.cli.context import build_context, options_from
from vp.core.result import Err
from vp.output.images import OutputFormat
from vp.services.images import ImageListService, resolve_app

channel_app = typer.Typer(add_completion=False, no_args_is_help=True, help="Manage channels.")
channel_image_app = typer.Typer(
    add_completion=False, no_args_is_help=True, help="Manage channel images."
)
channel_app.add_typer(channel_image_app, name="image")


@channel_image_app.command("ls")
def channel_image_ls(
    ctx: typer.Context,
    channel: str = typer.Option(..., "--channel", help="The channel name, slug, or ID"),
    version: str = typer.Option(
        "", "--version", help="Release semver (defaults to the current release)"
    ),
    keep_proxy: bool = typer.Option(
        False, "--keep-proxy", help="Keep proxy registry domain in image names"
    ),
    unique: bool = typer.Option(False, "--unique", help="Drop repeated images"),
    output: OutputFormat = typer.Option(OutputFormat.LIST, "--output", "-o", help="list or json"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show how the release was resolved"
    ),
) -> None:
    """List images in a channel's current or specified release.

    Examples:

        vp channel image ls --channel Stable

        vp channel image ls --channel Stable --version 1.2.1
    """
    require_channel(channel)
    cli = build_context(options_from(ctx))

    app = resolve_app(cli.api, cli.config.app)
    if isinstance(app, Err):
        exit_on_image_error(app.error, cli.console)

    service = ImageListService(api=cli.api, app=app.value)
    result = service.list_channel_images(channel, version, keep_proxy=keep_proxy, unique=unique)
    finish_image_listing(
        result, cli.console, output=output, keep_proxy=keep_proxy, verbose=verbose
    )
