"""Tests for vp.core.result."""

import pytest

from vp.core.result import Err, Ok, Result


class TestOk:
    def test_map_err_is_noop(self) -> None:
        assert Ok(21).map_err(lambda e: f"wrapped: {e}") == Ok(21)

    def test_repr(self) -> None:
        assert repr(Ok("nginx")) == "Ok('nginx')"

    def test_frozen(self) -> None:
        result = Ok(42)
        with pytest.raises(AttributeError):
            result.value = 0  # type: ignore[misc]


class TestErr:
    def test_map_err(self) -> None:
        assert Err("boom").map_err(lambda e: f"failed: {e}") == Err("failed: boom")

    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"


def test_pattern_matching() -> None:
    result: Result[str, str] = Ok("1.2.0")
    match result:
        case Ok(value):
            assert value == "1.2.0"
        case Err(_):
            pytest.fail("expected Ok")
