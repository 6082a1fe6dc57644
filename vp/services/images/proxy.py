"""Proxy registry domain resolution.

Two precedence cascades are in use. ``channel image ls`` uses cascade A;
``release image ls --version`` uses cascade B. They overlap but differ, and
both are kept as they are so existing output does not change.
``resolve_proxy_domain`` is the single ordered chain both would share if
they were unified.

Resolution never fails: an API lookup that errors is reported through
``ProxyLookup.on_error`` and treated as "no value" so the next source is
tried.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from vp.api.client import VendorApi
from vp.api.errors import ApiError
from vp.api.models import App, Channel, Release
from vp.core.result import Err

__all__ = [
    "DEFAULT_PROXY_DOMAIN",
    "ProxyLookup",
    "resolve_proxy_domain",
    "resolve_proxy_domain_cascade_a",
    "resolve_proxy_domain_cascade_b",
]

DEFAULT_PROXY_DOMAIN = "proxy.replicated.com"


def _ignore(_: ApiError) -> None:
    return None


@dataclass(frozen=True, slots=True)
class ProxyLookup:
    """Everything a cascade may consult, passed explicitly."""

    api: VendorApi
    app: App
    channel: Channel
    release: Release
    on_error: Callable[[ApiError], None] = _ignore

    def channel_proxy_hostname(self) -> str:
        result = self.api.get_custom_hostnames(self.app.id, self.app.app_type, self.channel.id)
        if isinstance(result, Err):
            self.on_error(result.error)
            return ""
        return result.value.proxy

    def app_default_proxy_hostname(self) -> str:
        result = self.api.get_default_proxy_hostname(self.app.id)
        if isinstance(result, Err):
            self.on_error(result.error)
            return ""
        return result.value


def resolve_proxy_domain_cascade_a(lookup: ProxyLookup) -> str:
    """Release field, then (kots apps only) the channel proxy hostname, else ``""``."""
    if lookup.release.proxy_registry_domain:
        return lookup.release.proxy_registry_domain

    if lookup.app.is_kots:
        hostname = lookup.channel_proxy_hostname()
        if hostname:
            return hostname

    return ""


def resolve_proxy_domain_cascade_b(lookup: ProxyLookup) -> str:
    """Release field, then for kots apps only: channel hostname, embedded
    cluster, app default and the fallback. Other app types get ``""``.
    """
    if lookup.release.proxy_registry_domain:
        return lookup.release.proxy_registry_domain

    if not lookup.app.is_kots:
        return ""

    hostname = lookup.channel_proxy_hostname()
    if hostname:
        return hostname

    if lookup.release.embedded_cluster_proxy_registry_domain:
        return lookup.release.embedded_cluster_proxy_registry_domain

    default = lookup.app_default_proxy_hostname()
    if default:
        return default

    return DEFAULT_PROXY_DOMAIN


def resolve_proxy_domain(lookup: ProxyLookup) -> str:
    """Unified chain: the same order as cascade B without the app type gate.

    Not used by any command yet; both ``image ls`` commands still call the
    cascade they have always used.
    """
    sources: tuple[Callable[[], str], ...] = (
        lambda: lookup.release.proxy_registry_domain,
        lookup.channel_proxy_hostname,
        lambda: lookup.release.embedded_cluster_proxy_registry_domain,
        lookup.app_default_proxy_hostname,
    )
    for source in sources:
        domain = source()
        if domain:
            return domain
    return DEFAULT_PROXY_DOMAIN
