"""Error type for vendor API calls."""

from __future__ import annotations

from dataclasses import dataclass

from vp.api.http import HttpError


@dataclass(frozen=True, slots=True)
class ApiError:
    """A failed vendor API call.

    Attributes:
        operation: What the client was doing, e.g. "list channel releases"
        message: Human-readable error message
        status: HTTP status code (0 for network or decoding errors)
        url: Request URL, when one was made
    """

    operation: str
    message: str
    status: int = 0
    url: str | None = None

    @classmethod
    def from_http(cls, operation: str, error: HttpError) -> ApiError:
        return cls(operation=operation, message=error.message, status=error.status, url=error.url)

    @property
    def is_not_found(self) -> bool:
        return self.status == 404

    def __str__(self) -> str:
        if self.status:
            return f"{self.operation}: HTTP {self.status}: {self.message}"
        return f"{self.operation}: {self.message}"
