from __future__ import annotations

import pytest

from vp.api.errors import ApiError
from vp.core.errors import ErrorCode
from vp.output.console import MockConsole, Style
from vp.output.errors import image_list_error_exit_code, print_image_list_error
from vp.services.images import (
    ApiFailure,
    AppNotSpecified,
    ChannelNotFound,
    ImageListError,
    NoReleasesInChannel,
    VersionNotFound,
)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (AppNotSpecified(), ErrorCode.USER_ERROR),
        (VersionNotFound("2.0.0"), ErrorCode.USER_ERROR),
        (ChannelNotFound("Beta"), ErrorCode.NOT_FOUND),
        (NoReleasesInChannel("ch-1"), ErrorCode.NOT_FOUND),
        (ApiFailure("get channel", ApiError("list channels", "down")), ErrorCode.NETWORK_ERROR),
    ],
)
def test_exit_codes(error: ImageListError, code: ErrorCode) -> None:
    assert image_list_error_exit_code(error) == int(code)


def test_version_not_found_message() -> None:
    console = MockConsole()
    print_image_list_error(VersionNotFound("2.0.0"), console)

    assert console.messages == ['error: no release found with version "2.0.0" in channel']


def test_app_not_specified_has_hint() -> None:
    console = MockConsole()
    print_image_list_error(AppNotSpecified(), console)

    assert console.messages[0] == "error: no app specified"
    assert console.outputs[1].style == Style.DIM
    assert "VP_APP" in console.messages[1]


def test_api_failure_shows_url() -> None:
    console = MockConsole()
    cause = ApiError("list channels", "Unauthorized", status=401, url="https://x/v3/app/a/channels")
    print_image_list_error(ApiFailure("get channel", cause), console)

    assert console.messages == [
        "error: failed to get channel: list channels: HTTP 401: Unauthorized",
        "url: https://x/v3/app/a/channels",
    ]
