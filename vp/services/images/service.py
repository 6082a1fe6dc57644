"""Image listing use cases behind ``channel image ls`` and ``release image ls``."""

from __future__ import annotations

from dataclasses import dataclass, field

from vp.api.client import VendorApi
from vp.api.errors import ApiError
from vp.api.models import App, Channel, Release
from vp.core.result import Err, Ok, Result
from vp.services.images.errors import (
    ApiFailure,
    AppNotSpecified,
    ChannelNotFound,
    ImageListError,
    NoReleasesInChannel,
)
from vp.services.images.normalize import clean_image_names
from vp.services.images.proxy import (
    ProxyLookup,
    resolve_proxy_domain_cascade_a,
    resolve_proxy_domain_cascade_b,
)
from vp.services.images.selector import select_release


@dataclass(frozen=True, slots=True)
class ImageListing:
    """Outcome of an image listing.

    ``proxy_domain`` is the resolved domain even when keep-proxy meant it
    was not used for stripping.
    """

    channel: Channel
    release: Release
    proxy_domain: str
    images: list[str]
    lookup_errors: tuple[ApiError, ...] = field(default=())


class ImageListService:
    """Resolve a channel's release and list its cleaned images.

    Args:
        api: Vendor API client
        app: The selected app
    """

    def __init__(self, *, api: VendorApi, app: App) -> None:
        self._api = api
        self._app = app

    def _channel(self, channel: str) -> Result[Channel, ImageListError]:
        result = self._api.get_channel_by_name(self._app.id, self._app.app_type, channel)
        if isinstance(result, Err):
            return Err(ApiFailure("get channel", result.error))
        if result.value is None:
            return Err(ChannelNotFound(channel))
        return Ok(result.value)

    def _select(self, channel: Channel, version: str) -> Result[Release, ImageListError]:
        listed = self._api.list_channel_releases(self._app.id, self._app.app_type, channel.id)
        if isinstance(listed, Err):
            return Err(ApiFailure("list channel releases", listed.error))
        return select_release(listed.value, version, channel_id=channel.id)

    def _listing(
        self,
        *,
        channel: Channel,
        release: Release,
        proxy_domain: str,
        keep_proxy: bool,
        unique: bool,
        lookup_errors: list[ApiError],
    ) -> ImageListing:
        strip_domain = "" if keep_proxy else proxy_domain
        return ImageListing(
            channel=channel,
            release=release,
            proxy_domain=proxy_domain,
            images=clean_image_names(release.airgap_bundle_images, strip_domain, unique=unique),
            lookup_errors=tuple(lookup_errors),
        )

    def list_channel_images(
        self,
        channel: str,
        version: str = "",
        *,
        keep_proxy: bool = False,
        unique: bool = False,
    ) -> Result[ImageListing, ImageListError]:
        """List images for ``channel image ls`` (release list + cascade A)."""
        resolved = self._channel(channel)
        if isinstance(resolved, Err):
            return resolved
        ch = resolved.value

        selected = self._select(ch, version)
        if isinstance(selected, Err):
            return selected
        release = selected.value

        errors: list[ApiError] = []
        lookup = ProxyLookup(
            api=self._api, app=self._app, channel=ch, release=release, on_error=errors.append
        )
        proxy_domain = resolve_proxy_domain_cascade_a(lookup)

        return Ok(
            self._listing(
                channel=ch,
                release=release,
                proxy_domain=proxy_domain,
                keep_proxy=keep_proxy,
                unique=unique,
                lookup_errors=errors,
            )
        )

    def list_release_images(
        self,
        channel: str,
        version: str = "",
        *,
        keep_proxy: bool = False,
        unique: bool = False,
    ) -> Result[ImageListing, ImageListError]:
        """List images for ``release image ls``.

        A specific version goes through the release list and cascade B; the
        current release comes from the API's current-release shortcut,
        which already carries its proxy domain.
        """
        resolved = self._channel(channel)
        if isinstance(resolved, Err):
            return resolved
        ch = resolved.value

        errors: list[ApiError] = []
        if version:
            selected = self._select(ch, version)
            if isinstance(selected, Err):
                return selected
            release = selected.value
            lookup = ProxyLookup(
                api=self._api, app=self._app, channel=ch, release=release, on_error=errors.append
            )
            proxy_domain = resolve_proxy_domain_cascade_b(lookup)
        else:
            current = self._api.get_current_channel_release(
                self._app.id, self._app.app_type, ch.id
            )
            if isinstance(current, Err):
                return Err(ApiFailure("get current channel release", current.error))
            if current.value is None:
                return Err(NoReleasesInChannel(ch.id))
            release, proxy_domain = current.value

        return Ok(
            self._listing(
                channel=ch,
                release=release,
                proxy_domain=proxy_domain,
                keep_proxy=keep_proxy,
                unique=unique,
                lookup_errors=errors,
            )
        )


def resolve_app(api: VendorApi, app_slug_or_id: str | None) -> Result[App, ImageListError]:
    """Look up the selected app, failing with AppNotSpecified when none is set."""
    if not app_slug_or_id:
        return Err(AppNotSpecified())
    return api.get_app(app_slug_or_id).map_err(lambda e: ApiFailure("get app", e))
