"""Typed configuration loading.

Configuration is resolved in layers, lowest precedence first:

1. Built-in defaults
2. TOML file (``$VP_CONFIG`` or ``~/.config/vp/config.toml``)
3. Environment variables (``VP_API_ORIGIN``, ``VP_API_TOKEN``, ``VP_APP``)

The ``--app`` flag is applied on top by the CLI.

Example config.toml::

    app = "my-app"

    [api]
    origin = "https://api.replicated.com/vendor"
    token = "..."
    timeout = 30
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "DEFAULT_API_ORIGIN",
    "DEFAULT_TIMEOUT",
    "default_config_path",
    "load_config",
    "resolve_config",
]

DEFAULT_API_ORIGIN = "https://api.replicated.com/vendor"
DEFAULT_TIMEOUT = 30.0

ENV_CONFIG = "VP_CONFIG"
ENV_API_ORIGIN = "VP_API_ORIGIN"
ENV_API_TOKEN = "VP_API_TOKEN"
ENV_APP = "VP_APP"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Resolved CLI configuration."""

    api_origin: str = DEFAULT_API_ORIGIN
    api_token: str | None = None
    app: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a parsed TOML mapping."""
        api: StrDict = get_table(data, "api") or {}
        return cls(
            api_origin=(get_str(api, "origin") or DEFAULT_API_ORIGIN).rstrip("/"),
            api_token=get_str(api, "token"),
            app=get_str(data, "app"),
            timeout=get_float(api, "timeout") or DEFAULT_TIMEOUT,
        )

    def with_env(self, env: Mapping[str, str]) -> Config:
        """Overlay environment variables on top of this config."""
        origin = env.get(ENV_API_ORIGIN, "").strip()
        token = env.get(ENV_API_TOKEN, "").strip()
        app = env.get(ENV_APP, "").strip()
        return replace(
            self,
            api_origin=origin.rstrip("/") if origin else self.api_origin,
            api_token=token or self.api_token,
            app=app or self.app,
        )

    def with_app(self, app: str | None) -> Config:
        """Overlay an explicit app selection (the ``--app`` flag)."""
        if app is None or not app.strip():
            return self
        return replace(self, app=app.strip())


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the config file location (``$VP_CONFIG`` wins)."""
    env = os.environ if env is None else env
    override = env.get(ENV_CONFIG, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "vp" / "config.toml"


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load configuration from a TOML file.

    Args:
        path: Path to config.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))


def resolve_config(
    env: Mapping[str, str] | None = None,
    path: Path | None = None,
) -> Result[Config, ConfigError]:
    """Resolve defaults, the config file (if present) and the environment.

    A missing config file is not an error; an unreadable or invalid one is.
    """
    env = os.environ if env is None else env
    path = default_config_path(env) if path is None else path

    config = Config()
    if path.exists():
        loaded = load_config(path)
        if isinstance(loaded, Err):
            return loaded
        config = loaded.value

    return Ok(config.with_env(env))
