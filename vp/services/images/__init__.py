"""Release image listing: release selection, proxy domain resolution and
image reference normalization."""

from vp.services.images.errors import (
    ApiFailure,
    AppNotSpecified,
    ChannelNotFound,
    ImageListError,
    NoReleasesInChannel,
    VersionNotFound,
)
from vp.services.images.normalize import clean_image_name, clean_image_names
from vp.services.images.proxy import (
    DEFAULT_PROXY_DOMAIN,
    ProxyLookup,
    resolve_proxy_domain,
    resolve_proxy_domain_cascade_a,
    resolve_proxy_domain_cascade_b,
)
from vp.services.images.selector import select_release
from vp.services.images.service import ImageListing, ImageListService, resolve_app

__all__ = [
    # errors
    "ApiFailure",
    "AppNotSpecified",
    "ChannelNotFound",
    "ImageListError",
    "NoReleasesInChannel",
    "VersionNotFound",
    # pure helpers
    "clean_image_name",
    "clean_image_names",
    "select_release",
    # proxy resolution
    "DEFAULT_PROXY_DOMAIN",
    "ProxyLookup",
    "resolve_proxy_domain",
    "resolve_proxy_domain_cascade_a",
    "resolve_proxy_domain_cascade_b",
    # orchestration
    "ImageListing",
    "ImageListService",
    "resolve_app",
]
