from __future__ import annotations

from dataclasses import dataclass

from vp.api.errors import ApiError


@dataclass(frozen=True, slots=True)
class AppNotSpecified:
    @property
    def message(self) -> str:
        return "no app specified"

    @property
    def hint(self) -> str:
        return "pass --app, set VP_APP, or add `app = ...` to the config file"


@dataclass(frozen=True, slots=True)
class ChannelNotFound:
    channel: str

    @property
    def message(self) -> str:
        return f"channel {self.channel!r} not found"


@dataclass(frozen=True, slots=True)
class NoReleasesInChannel:
    channel_id: str = ""

    @property
    def message(self) -> str:
        return "no releases found in channel"


@dataclass(frozen=True, slots=True)
class VersionNotFound:
    requested_version: str

    @property
    def message(self) -> str:
        return f'no release found with version "{self.requested_version}" in channel'


@dataclass(frozen=True, slots=True)
class ApiFailure:
    action: str
    cause: ApiError

    @property
    def message(self) -> str:
        return f"failed to {self.action}: {self.cause}"


ImageListError = (
    AppNotSpecified | ChannelNotFound | NoReleasesInChannel | VersionNotFound | ApiFailure
)
