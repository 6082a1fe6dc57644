"""Vendor API client.

Only the read calls needed to list a release's images are implemented.
Every call returns a ``Result``; nothing here retries.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable
from urllib.parse import quote, urlencode

from vp.api.errors import ApiError
from vp.api.http import HttpClient
from vp.api.models import App, Channel, CustomHostnames, Release, default_proxy_hostname
from vp.core.result import Err, Ok, Result
from vp.core.structured import as_str_dict, get_list, get_table

__all__ = ["VendorApi", "VendorApiClient", "CurrentRelease"]

# (release, proxy registry domain)
type CurrentRelease = tuple[Release, str]


@runtime_checkable
class VendorApi(Protocol):
    """The vendor API calls the image commands depend on."""

    def get_app(self, app_slug_or_id: str) -> Result[App, ApiError]: ...

    def get_channel_by_name(
        self, app_id: str, app_type: str, name_or_id: str
    ) -> Result[Channel | None, ApiError]: ...

    def list_channel_releases(
        self, app_id: str, app_type: str, channel_id: str
    ) -> Result[list[Release], ApiError]: ...

    def get_custom_hostnames(
        self, app_id: str, app_type: str, channel_id: str
    ) -> Result[CustomHostnames, ApiError]: ...

    def get_default_proxy_hostname(self, app_id: str) -> Result[str, ApiError]: ...

    def get_current_channel_release(
        self, app_id: str, app_type: str, channel_id: str
    ) -> Result[CurrentRelease | None, ApiError]: ...


def _seg(value: str) -> str:
    return quote(value, safe="")


class VendorApiClient:
    """``VendorApi`` over an injectable ``HttpClient``.

    Args:
        http: Transport (``RealHttpClient`` in production)
        origin: API origin, e.g. ``https://api.replicated.com/vendor``
    """

    def __init__(self, http: HttpClient, origin: str) -> None:
        self._http = http
        self._origin = origin.rstrip("/")

    def _get(self, operation: str, path: str) -> Result[dict[str, Any], ApiError]:
        result = self._http.get_json(f"{self._origin}{path}")
        if isinstance(result, Err):
            return Err(ApiError.from_http(operation, result.error))
        return result

    def _channel_detail(
        self, operation: str, app_id: str, channel_id: str
    ) -> Result[Channel, ApiError]:
        result = self._get(operation, f"/v3/app/{_seg(app_id)}/channel/{_seg(channel_id)}")
        if isinstance(result, Err):
            return result
        table = get_table(result.value, "channel")
        if table is None:
            return Err(ApiError(operation, "response has no channel object"))
        return Ok(Channel.from_dict(table))

    def get_app(self, app_slug_or_id: str) -> Result[App, ApiError]:
        result = self._get("get app", f"/v3/app/{_seg(app_slug_or_id)}")
        if isinstance(result, Err):
            return result
        table = get_table(result.value, "app")
        if table is None:
            return Err(ApiError("get app", "response has no app object"))
        return Ok(App.from_dict(table))

    def get_channel_by_name(
        self, app_id: str, app_type: str, name_or_id: str
    ) -> Result[Channel | None, ApiError]:
        """Find a channel by name, slug or id.

        Returns Ok(None) when no channel matches.
        """
        query = urlencode({"channelName": name_or_id, "excludeDetail": "true"})
        listed = self._get("list channels", f"/v3/app/{_seg(app_id)}/channels?{query}")
        if isinstance(listed, Err):
            return listed

        for item in get_list(listed.value, "channels") or []:
            table = as_str_dict(item)
            if table is None:
                continue
            channel = Channel.from_dict(table)
            if channel.matches(name_or_id):
                return Ok(channel)

        # The name filter does not match ids; try a direct lookup.
        direct = self._channel_detail("get channel", app_id, name_or_id)
        if isinstance(direct, Err):
            if direct.error.is_not_found:
                return Ok(None)
            return direct
        return Ok(direct.value)

    def list_channel_releases(
        self, app_id: str, app_type: str, channel_id: str
    ) -> Result[list[Release], ApiError]:
        result = self._get(
            "list channel releases",
            f"/v3/app/{_seg(app_id)}/channel/{_seg(channel_id)}/releases",
        )
        if isinstance(result, Err):
            return result

        releases: list[Release] = []
        for item in get_list(result.value, "releases") or []:
            table = as_str_dict(item)
            if table is not None:
                releases.append(Release.from_dict(table))
        return Ok(releases)

    def get_custom_hostnames(
        self, app_id: str, app_type: str, channel_id: str
    ) -> Result[CustomHostnames, ApiError]:
        result = self._get(
            "get custom hostnames", f"/v3/app/{_seg(app_id)}/channel/{_seg(channel_id)}"
        )
        if isinstance(result, Err):
            return result
        channel = get_table(result.value, "channel") or {}
        overrides = get_table(channel, "customHostNameOverrides") or {}
        return Ok(CustomHostnames.from_overrides(overrides))

    def get_default_proxy_hostname(self, app_id: str) -> Result[str, ApiError]:
        result = self._get("get default proxy hostname", f"/v3/app/{_seg(app_id)}/custom-hostnames")
        if isinstance(result, Err):
            return result
        return Ok(default_proxy_hostname(result.value))

    def get_current_channel_release(
        self, app_id: str, app_type: str, channel_id: str
    ) -> Result[CurrentRelease | None, ApiError]:
        """Return the channel's current release and its proxy domain.

        Uses the releases embedded in the channel detail when the current one
        carries images, saving the release listing call. The proxy domain is
        the release's own, else the channel's proxy override, else ``""``.
        Returns Ok(None) when the channel has no releases.
        """
        detail = self._channel_detail("get current channel release", app_id, channel_id)
        if isinstance(detail, Err):
            return detail
        channel = detail.value

        releases: list[Release] = list(channel.releases)
        if not releases or not _current(releases).airgap_bundle_images:
            listed = self.list_channel_releases(app_id, app_type, channel_id)
            if isinstance(listed, Err):
                return listed
            releases = listed.value
        if not releases:
            return Ok(None)

        release = _current(releases)
        proxy_domain = release.proxy_registry_domain or channel.proxy_hostname
        return Ok((release, proxy_domain))


def _current(releases: list[Release]) -> Release:
    # max() keeps the first of equal keys
    return max(releases, key=lambda r: r.channel_sequence)
