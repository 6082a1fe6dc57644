from __future__ import annotations

from collections.abc import Sequence

from vp.api.models import Release
from vp.core.result import Err, Ok, Result
from vp.services.images.errors import ImageListError, NoReleasesInChannel, VersionNotFound


def select_release(
    releases: Sequence[Release],
    requested_version: str,
    *,
    channel_id: str = "",
) -> Result[Release, ImageListError]:
    """Pick a release by exact semver, or the current one.

    With ``requested_version`` set, the first release (in input order) whose
    semver is exactly equal wins. Otherwise the release with the highest
    channel sequence wins; on a tie the earliest one is kept.
    """
    if not releases:
        return Err(NoReleasesInChannel(channel_id))

    if requested_version:
        for release in releases:
            if release.semver == requested_version:
                return Ok(release)
        return Err(VersionNotFound(requested_version))

    current = releases[0]
    for release in releases[1:]:
        if release.channel_sequence > current.channel_sequence:
            current = release
    return Ok(current)
