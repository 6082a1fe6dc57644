from __future__ import annotations

from dataclasses import dataclass

import typer

from vp.api.client import VendorApi, VendorApiClient
from vp.api.http import RealHttpClient
from vp.core.config import Config, resolve_config
from vp.core.errors import ErrorCode
from vp.core.result import Err
from vp.output.console import ConsoleProtocol, RichConsole, Style


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Root-level options, carried on ``typer.Context.obj``."""

    app: str | None = None


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol
    api: VendorApi


def options_from(ctx: typer.Context) -> GlobalOptions:
    obj = ctx.obj
    if isinstance(obj, GlobalOptions):
        return obj
    return GlobalOptions()


def build_context(options: GlobalOptions) -> CLIContext:
    console = RichConsole()

    config_result = resolve_config()
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
    config = config_result.value.with_app(options.app)

    if not config.api_token:
        console.error("no API token configured")
        console.print("hint: set VP_API_TOKEN or [api].token in the config file", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    http = RealHttpClient(token=config.api_token, timeout=config.timeout)
    return CLIContext(
        config=config,
        console=console,
        api=VendorApiClient(http, config.api_origin),
    )
