"""Tests for vp.core.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from vp.core.config import (
    DEFAULT_API_ORIGIN,
    Config,
    default_config_path,
    load_config,
    resolve_config,
)
from vp.core.result import Err, Ok


class TestConfig:
    def test_defaults(self) -> None:
        config = Config()
        assert config.api_origin == DEFAULT_API_ORIGIN
        assert config.api_token is None
        assert config.app is None
        assert config.timeout == 30.0

    def test_from_dict(self) -> None:
        config = Config.from_dict(
            {
                "app": "my-app",
                "api": {"origin": "https://vendor.example.com/", "token": "t", "timeout": 5},
            }
        )
        assert config == Config(
            api_origin="https://vendor.example.com",
            api_token="t",
            app="my-app",
            timeout=5.0,
        )

    def test_env_overrides_file(self) -> None:
        config = Config(api_token="file-token", app="file-app").with_env(
            {"VP_API_TOKEN": "env-token", "VP_APP": "", "VP_API_ORIGIN": "http://localhost:3000/"}
        )
        assert config.api_token == "env-token"
        assert config.app == "file-app"
        assert config.api_origin == "http://localhost:3000"

    def test_with_app(self) -> None:
        config = Config(app="from-env")
        assert config.with_app("flag").app == "flag"
        assert config.with_app(None).app == "from-env"
        assert config.with_app("  ").app == "from-env"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Config().app = "x"  # type: ignore[misc]


class TestLoadConfig:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('app = "acme"\n\n[api]\ntoken = "abc"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.app == "acme"
        assert result.value.api_token == "abc"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("app = ", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "nope.toml")

        assert isinstance(result, Err)
        assert "not found" in result.error.message


class TestResolveConfig:
    def test_missing_file_is_not_an_error(self, tmp_path: Path) -> None:
        result = resolve_config({"VP_API_TOKEN": "t"}, tmp_path / "absent.toml")

        assert result == Ok(Config(api_token="t"))

    def test_layers(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('app = "file-app"\n[api]\ntoken = "file"\n', encoding="utf-8")

        result = resolve_config({"VP_API_TOKEN": "env"}, path)

        assert isinstance(result, Ok)
        assert result.value.app == "file-app"
        assert result.value.api_token == "env"

    def test_invalid_file_is_an_error(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[api\n", encoding="utf-8")

        assert isinstance(resolve_config({}, path), Err)

    def test_config_path_from_env(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        path.write_text('app = "x"\n', encoding="utf-8")

        assert default_config_path({"VP_CONFIG": str(path)}) == path
        result = resolve_config({"VP_CONFIG": str(path)})
        assert isinstance(result, Ok)
        assert result.value.app == "x"
