"""JSON-over-HTTP transport for the vendor API.

Every call returns a ``Result``; transport failures, error statuses and
malformed bodies all surface as ``HttpError`` values rather than exceptions.
"""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Protocol, cast, runtime_checkable

from vp.core.result import Err, Ok, Result
from vp.core.structured import as_str_dict, get_str, get_table

__all__ = [
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
    "HttpError",
    "error_message_from_body",
]


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


def error_message_from_body(body: bytes, *, fallback: str) -> str:
    """Pick the most useful message out of an API error response.

    The vendor API answers errors with either ``{"error": {"message": ...}}``
    or ``{"message": ...}``. Anything else is returned as raw text, and an
    empty body falls back to the HTTP reason phrase.
    """
    text = body.decode("utf-8", errors="replace").strip()
    if not text:
        return fallback

    try:
        data = as_str_dict(json.loads(text))
    except json.JSONDecodeError:
        return text
    if data is None:
        return text

    nested = get_str(get_table(data, "error") or {}, "message")
    if nested:
        return nested
    return get_str(data, "message") or text


def _read_error_body(error: urllib.error.HTTPError) -> bytes:
    try:
        return error.read()
    except OSError:
        return b""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations.

    Lets tests inject canned API responses instead of reaching the network.
    """

    def get_json(self, url: str) -> Result[dict[str, Any], HttpError]:
        """Fetch URL and parse the body as a JSON object.

        Args:
            url: Absolute URL to fetch

        Returns:
            Ok with parsed JSON dict, or Err with HttpError
        """
        ...


class RealHttpClient:
    """HTTP client using urllib.

    Sends the vendor API token as the ``Authorization`` header on every
    request and asks for JSON.
    """

    def __init__(
        self,
        *,
        token: str | None = None,
        timeout: float = 30.0,
        user_agent: str = "vp-cli/0.1.0",
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._token = token
        self._ssl_context = ssl.create_default_context()

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self._token:
            headers["Authorization"] = self._token
        return headers

    def _request(self, url: str) -> Result[bytes, HttpError]:
        try:
            req = urllib.request.Request(url, headers=self._headers())
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                return Ok(response.read())
        except urllib.error.HTTPError as e:
            message = error_message_from_body(_read_error_body(e), fallback=str(e.reason))
            return Err(HttpError(url=url, status=e.code, message=message))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))

    def get_json(self, url: str) -> Result[dict[str, Any], HttpError]:
        result = self._request(url)
        if isinstance(result, Err):
            return result

        try:
            data_obj: object = json.loads(result.value.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(HttpError(url=url, status=0, message=f"JSON parse error: {e}"))

        data = as_str_dict(data_obj)
        if data is None:
            return Err(HttpError(url=url, status=0, message="Expected JSON object"))
        return Ok(cast(dict[str, Any], data))


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_json("https://api.example.com/v3/app/a", {"app": {"id": "a"}})
        result = client.get_json("https://api.example.com/v3/app/a")
        assert result == Ok({"app": {"id": "a"}})
    """

    def __init__(self) -> None:
        self._json_responses: dict[str, dict[str, Any] | HttpError] = {}
        self.calls: list[str] = []

    def set_json(self, url: str, response: dict[str, Any] | HttpError) -> None:
        """Set JSON response (or error) for URL."""
        self._json_responses[url] = response

    def get_json(self, url: str) -> Result[dict[str, Any], HttpError]:
        self.calls.append(url)

        if url not in self._json_responses:
            return Err(HttpError(url=url, status=404, message="Not found (mock)"))

        response = self._json_responses[url]
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)
