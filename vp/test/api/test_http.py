"""Tests for vp.api.http."""

from __future__ import annotations

import io
import urllib.error
from typing import Any

import pytest

from vp.api.http import (
    HttpClient,
    HttpError,
    MockHttpClient,
    RealHttpClient,
    error_message_from_body,
)
from vp.core.result import Err, Ok


class TestHttpError:
    def test_str_with_status(self) -> None:
        error = HttpError(url="https://example.com/api", status=500, message="Internal Error")
        assert str(error) == "HTTP 500: Internal Error (https://example.com/api)"

    def test_str_without_status(self) -> None:
        error = HttpError(url="https://example.com", status=0, message="Timeout")
        assert str(error) == "Timeout (https://example.com)"

    def test_is_frozen(self) -> None:
        error = HttpError(url="https://example.com", status=404, message="Not Found")
        with pytest.raises(AttributeError):
            error.status = 500  # type: ignore[misc]


class TestMockHttpClient:
    def test_isinstance_check(self) -> None:
        assert isinstance(MockHttpClient(), HttpClient)

    def test_get_json_success(self) -> None:
        client = MockHttpClient()
        client.set_json("https://api.example.com/v3/app/a", {"app": {"id": "a"}})

        result = client.get_json("https://api.example.com/v3/app/a")

        assert result == Ok({"app": {"id": "a"}})
        assert client.calls == ["https://api.example.com/v3/app/a"]

    def test_unknown_url_is_404(self) -> None:
        result = MockHttpClient().get_json("https://api.example.com/missing")

        assert isinstance(result, Err)
        assert result.error.status == 404

    def test_error_response(self) -> None:
        client = MockHttpClient()
        error = HttpError(url="https://api.example.com/x", status=500, message="Server Error")
        client.set_json("https://api.example.com/x", error)

        assert client.get_json("https://api.example.com/x") == Err(error)


class _FakeResponse:
    def __init__(self, body: bytes) -> None:
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> _FakeResponse:
        return self

    def __exit__(self, *_: object) -> None:
        return None


class TestRealHttpClient:
    def test_isinstance_check(self) -> None:
        assert isinstance(RealHttpClient(), HttpClient)

    def test_sends_token_and_parses_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: dict[str, Any] = {}

        def fake_urlopen(req: Any, timeout: float, context: Any) -> _FakeResponse:
            seen["auth"] = req.get_header("Authorization")
            seen["timeout"] = timeout
            return _FakeResponse(b'{"releases": []}')

        monkeypatch.setattr("urllib.request.urlopen", fake_urlopen)

        client = RealHttpClient(token="secret", timeout=5.0)
        result = client.get_json("https://api.example.com/v3/app/a/channel/c/releases")

        assert result == Ok({"releases": []})
        assert seen == {"auth": "secret", "timeout": 5.0}

    def test_non_object_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "urllib.request.urlopen", lambda *_a, **_k: _FakeResponse(b"[1, 2]")
        )

        result = RealHttpClient().get_json("https://api.example.com/x")

        assert isinstance(result, Err)
        assert result.error.message == "Expected JSON object"

    def test_invalid_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "urllib.request.urlopen", lambda *_a, **_k: _FakeResponse(b"<html>")
        )

        result = RealHttpClient().get_json("https://api.example.com/x")

        assert isinstance(result, Err)
        assert result.error.message.startswith("JSON parse error")

    def test_network_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fail(*_a: object, **_k: object) -> _FakeResponse:
            raise urllib.error.URLError("connection refused")

        monkeypatch.setattr("urllib.request.urlopen", fail)

        result = RealHttpClient().get_json("https://api.example.com/x")

        assert result == Err(
            HttpError(url="https://api.example.com/x", status=0, message="connection refused")
        )

    def test_http_error_uses_api_message(self, monkeypatch: pytest.MonkeyPatch) -> None:
        url = "https://api.example.com/v3/app/a"

        def fail(*_a: object, **_k: object) -> _FakeResponse:
            body = io.BytesIO(b'{"error": {"code": "forbidden", "message": "token expired"}}')
            raise urllib.error.HTTPError(url, 403, "Forbidden", {}, body)  # type: ignore[arg-type]

        monkeypatch.setattr("urllib.request.urlopen", fail)

        result = RealHttpClient(token="t").get_json(url)

        assert result == Err(HttpError(url=url, status=403, message="token expired"))


class TestErrorMessageFromBody:
    @pytest.mark.parametrize(
        ("body", "expected"),
        [
            (b'{"error": {"message": "token expired"}}', "token expired"),
            (b'{"message": "app not found"}', "app not found"),
            (b'{"error_code": "x"}', '{"error_code": "x"}'),
            (b"upstream unavailable\n", "upstream unavailable"),
            (b"[1]", "[1]"),
            (b"", "Bad Gateway"),
        ],
    )
    def test_message(self, body: bytes, expected: str) -> None:
        assert error_message_from_body(body, fallback="Bad Gateway") == expected
