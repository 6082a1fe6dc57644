"""Shared plumbing for the ``image ls`` commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from vp.core.errors import ErrorCode
from vp.core.result import Err, Result
from vp.output.console import RichConsole, Style
from vp.output.errors import image_list_error_exit_code, print_image_list_error
from vp.output.images import OutputFormat, print_channel_images
from vp.services.images import ImageListError, ImageListing

if TYPE_CHECKING:
    from vp.output.console import ConsoleProtocol


def require_channel(channel: str) -> None:
    """Reject a blank ``--channel`` before any config or API work."""
    if channel.strip():
        return
    RichConsole().error("channel is required")
    raise typer.Exit(code=int(ErrorCode.USER_ERROR))


def exit_on_image_error(error: ImageListError, console: ConsoleProtocol) -> NoReturn:
    print_image_list_error(error, console)
    raise typer.Exit(code=image_list_error_exit_code(error))


def print_verbose(listing: ImageListing, console: ConsoleProtocol, *, keep_proxy: bool) -> None:
    channel = listing.channel
    release = listing.release
    console.print(f"channel: {channel.name or channel.id} ({channel.id})", Style.DIM)
    console.print(
        f"release: {release.semver or '-'} (sequence {release.channel_sequence})", Style.DIM
    )
    proxy = listing.proxy_domain or "(none)"
    if keep_proxy:
        proxy += " [kept]"
    console.print(f"proxy domain: {proxy}", Style.DIM)
    for error in listing.lookup_errors:
        console.warning(f"proxy lookup skipped: {error}")


def finish_image_listing(
    result: Result[ImageListing, ImageListError],
    console: ConsoleProtocol,
    *,
    output: OutputFormat,
    keep_proxy: bool,
    verbose: bool,
) -> None:
    """Print the images, or the error and exit non-zero."""
    if isinstance(result, Err):
        exit_on_image_error(result.error, console)

    listing = result.value
    if verbose:
        print_verbose(listing, console, keep_proxy=keep_proxy)
    print_channel_images(listing.images, console, output=output)
