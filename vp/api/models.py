"""Vendor API wire models.

Payloads are narrowed with ``vp.core.structured`` helpers; missing or
mistyped fields fall back to empty values rather than failing, since
the API omits empty fields.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from vp.core.structured import (
    StrDict,
    as_str_dict,
    get_bool,
    get_int,
    get_list,
    get_path,
    get_str_list,
    get_table,
    get_text,
)

__all__ = [
    "APP_TYPE_KOTS",
    "APP_TYPE_PLATFORM",
    "App",
    "Channel",
    "CustomHostnames",
    "Release",
    "default_proxy_hostname",
]

APP_TYPE_KOTS = "kots"
APP_TYPE_PLATFORM = "platform"


@dataclass(frozen=True, slots=True)
class App:
    id: str
    slug: str = ""
    name: str = ""
    app_type: str = APP_TYPE_KOTS

    @property
    def is_kots(self) -> bool:
        return self.app_type == APP_TYPE_KOTS

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> App:
        return cls(
            id=get_text(data, "id"),
            slug=get_text(data, "slug"),
            name=get_text(data, "name"),
            app_type=get_text(data, "appType") or APP_TYPE_KOTS,
        )


@dataclass(frozen=True, slots=True)
class Release:
    """A release promoted to a channel.

    ``airgap_bundle_images`` keeps the API order and any duplicates.
    """

    semver: str = ""
    channel_sequence: int = 0
    proxy_registry_domain: str = ""
    airgap_bundle_images: tuple[str, ...] = ()
    embedded_cluster_proxy_registry_domain: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Release:
        embedded: StrDict = get_path(data, "installationTypes", "embeddedCluster") or {}
        return cls(
            semver=get_text(data, "semver"),
            channel_sequence=get_int(data, "channelSequence") or 0,
            proxy_registry_domain=get_text(data, "proxyRegistryDomain"),
            airgap_bundle_images=tuple(get_str_list(data, "airgapBundleImages")),
            embedded_cluster_proxy_registry_domain=get_text(embedded, "proxyRegistryDomain"),
        )


def _releases(items: list[object] | None) -> tuple[Release, ...]:
    out: list[Release] = []
    for item in items or []:
        table = as_str_dict(item)
        if table is not None:
            out.append(Release.from_dict(table))
    return tuple(out)


@dataclass(frozen=True, slots=True)
class Channel:
    id: str
    name: str = ""
    slug: str = ""
    proxy_hostname: str = ""
    releases: tuple[Release, ...] = field(default=())

    def matches(self, name_or_id: str) -> bool:
        """True if ``name_or_id`` is this channel's id, name or slug."""
        return name_or_id in (self.id, self.name, self.slug)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Channel:
        proxy: StrDict = get_path(data, "customHostNameOverrides", "proxy") or {}
        return cls(
            id=get_text(data, "id"),
            name=get_text(data, "name"),
            slug=get_text(data, "channelSlug"),
            proxy_hostname=get_text(proxy, "hostname"),
            releases=_releases(get_list(data, "releases")),
        )


@dataclass(frozen=True, slots=True)
class CustomHostnames:
    """Custom hostname overrides in effect for a channel."""

    registry: str = ""
    proxy: str = ""
    download_portal: str = ""
    replicated_app: str = ""

    @classmethod
    def from_overrides(cls, data: Mapping[str, object]) -> CustomHostnames:
        """Build from a channel's ``customHostNameOverrides`` object."""

        def hostname(key: str) -> str:
            return get_text(get_table(data, key) or {}, "hostname")

        return cls(
            registry=hostname("registry"),
            proxy=hostname("proxy"),
            download_portal=hostname("downloadPortal"),
            replicated_app=hostname("replicatedApp"),
        )


def default_proxy_hostname(data: Mapping[str, object]) -> str:
    """Pick the default proxy hostname from an app's custom hostname listing.

    The listing groups hostnames by kind (``registry``, ``proxy``, ...); only
    a ``proxy`` entry flagged ``is_default`` counts.
    """
    for item in get_list(data, "proxy") or []:
        entry = as_str_dict(item)
        if entry is None:
            continue
        if get_bool(entry, "is_default"):
            return get_text(entry, "hostname")
    return ""
