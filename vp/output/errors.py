"""Error presentation for image listing commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vp.core.errors import ErrorCode
from vp.output.console import Style
from vp.services.images.errors import (
    ApiFailure,
    AppNotSpecified,
    ChannelNotFound,
    ImageListError,
    NoReleasesInChannel,
    VersionNotFound,
)

if TYPE_CHECKING:
    from vp.output.console import ConsoleProtocol

__all__ = ["print_image_list_error", "image_list_error_exit_code"]


def print_image_list_error(error: ImageListError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    match error:
        case AppNotSpecified(hint=hint):
            console.print(f"hint: {hint}", Style.DIM)
        case ChannelNotFound():
            console.print("hint: pass a channel name, slug or id", Style.DIM)
        case ApiFailure(cause=cause) if cause.url:
            console.print(f"url: {cause.url}", Style.DIM)
        case _:
            pass


def image_list_error_exit_code(error: ImageListError) -> int:
    match error:
        case AppNotSpecified() | VersionNotFound():
            return int(ErrorCode.USER_ERROR)
        case ChannelNotFound() | NoReleasesInChannel():
            return int(ErrorCode.NOT_FOUND)
        case ApiFailure():
            return int(ErrorCode.NETWORK_ERROR)
    return int(ErrorCode.USER_ERROR)
