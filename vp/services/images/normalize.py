"""Image reference normalization.

Strips vendor proxy wrapping and Docker Hub mirror prefixes from raw image
references so they read the way users wrote them in their manifests.
Image references are never parsed; rules are plain prefix matches.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["PUBLIC_REGISTRY_PREFIXES", "clean_image_name", "clean_image_names"]

# Order matters: each "library/" form precedes its bare host form.
PUBLIC_REGISTRY_PREFIXES: tuple[str, ...] = (
    "registry-1.docker.io/library/",
    "registry-1.docker.io/",
    "docker.io/library/",
    "docker.io/",
    "index.docker.io/library/",
    "index.docker.io/",
    "hub.docker.com/library/",
    "hub.docker.com/",
    "registry.hub.docker.com/library/",
    "registry.hub.docker.com/",
)


def _strip_proxy(cleaned: str, domain: str) -> str:
    # All three checks run; none short-circuits the others.
    proxy_prefix = domain + "/proxy/"
    if cleaned.startswith(proxy_prefix):
        # Drop the app slug after /proxy/. With no segment after the slug
        # the reference is left untouched.
        parts = cleaned.removeprefix(proxy_prefix).split("/", 1)
        if len(parts) == 2:
            cleaned = parts[1]

    anonymous_prefix = domain + "/anonymous/"
    if cleaned.startswith(anonymous_prefix):
        cleaned = cleaned.removeprefix(anonymous_prefix)

    library_prefix = domain + "/library/"
    if cleaned.startswith(library_prefix):
        cleaned = cleaned.removeprefix(library_prefix)

    return cleaned


def clean_image_name(image: str, proxy_registry_domain: str) -> str:
    """Return ``image`` with proxy and public registry prefixes removed.

    Args:
        image: Raw image reference, e.g. ``proxy.example.com/proxy/app/nginx:1``
        proxy_registry_domain: Vendor proxy host. ``""`` skips proxy stripping
            entirely, which is how keep-proxy is implemented.

    Public registry prefixes are always stripped, checked in
    ``PUBLIC_REGISTRY_PREFIXES`` order against the progressively cleaned
    value.
    """
    cleaned = image

    if proxy_registry_domain:
        cleaned = _strip_proxy(cleaned, proxy_registry_domain)

    for prefix in PUBLIC_REGISTRY_PREFIXES:
        if cleaned.startswith(prefix):
            cleaned = cleaned.removeprefix(prefix)

    return cleaned


def clean_image_names(
    images: Iterable[str],
    proxy_registry_domain: str,
    *,
    unique: bool = False,
) -> list[str]:
    """Clean every image, dropping empty results.

    Order and duplicates are kept unless ``unique`` is set, in which case
    only the first occurrence of each cleaned reference is kept.
    """
    out: list[str] = []
    seen: set[str] = set()
    for image in images:
        cleaned = clean_image_name(image, proxy_registry_domain)
        if not cleaned:
            continue
        if unique:
            if cleaned in seen:
                continue
            seen.add(cleaned)
        out.append(cleaned)
    return out
