"""In-memory VendorApi for service and CLI tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from vp.api.client import CurrentRelease
from vp.api.errors import ApiError
from vp.api.models import App, Channel, CustomHostnames, Release
from vp.core.result import Err, Ok, Result


def _no_calls() -> list[str]:
    return []


@dataclass
class FakeVendorApi:
    """Returns canned values; set a field to an ApiError to make that call fail."""

    app: App | ApiError = field(default_factory=lambda: App(id="app-1", slug="my-app"))
    channels: list[Channel] = field(default_factory=list)
    channel_error: ApiError | None = None
    releases: list[Release] | ApiError = field(default_factory=list)
    custom_hostnames: CustomHostnames | ApiError = field(default_factory=CustomHostnames)
    default_proxy: str | ApiError = ""
    current: CurrentRelease | None | ApiError = None
    calls: list[str] = field(default_factory=_no_calls)

    def get_app(self, app_slug_or_id: str) -> Result[App, ApiError]:
        self.calls.append("get_app")
        if isinstance(self.app, ApiError):
            return Err(self.app)
        return Ok(self.app)

    def get_channel_by_name(
        self, app_id: str, app_type: str, name_or_id: str
    ) -> Result[Channel | None, ApiError]:
        self.calls.append("get_channel_by_name")
        if self.channel_error is not None:
            return Err(self.channel_error)
        for channel in self.channels:
            if channel.matches(name_or_id):
                return Ok(channel)
        return Ok(None)

    def list_channel_releases(
        self, app_id: str, app_type: str, channel_id: str
    ) -> Result[list[Release], ApiError]:
        self.calls.append("list_channel_releases")
        if isinstance(self.releases, ApiError):
            return Err(self.releases)
        return Ok(list(self.releases))

    def get_custom_hostnames(
        self, app_id: str, app_type: str, channel_id: str
    ) -> Result[CustomHostnames, ApiError]:
        self.calls.append("get_custom_hostnames")
        if isinstance(self.custom_hostnames, ApiError):
            return Err(self.custom_hostnames)
        return Ok(self.custom_hostnames)

    def get_default_proxy_hostname(self, app_id: str) -> Result[str, ApiError]:
        self.calls.append("get_default_proxy_hostname")
        if isinstance(self.default_proxy, ApiError):
            return Err(self.default_proxy)
        return Ok(self.default_proxy)

    def get_current_channel_release(
        self, app_id: str, app_type: str, channel_id: str
    ) -> Result[CurrentRelease | None, ApiError]:
        self.calls.append("get_current_channel_release")
        if isinstance(self.current, ApiError):
            return Err(self.current)
        return Ok(self.current)
