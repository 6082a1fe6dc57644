"""Printing of cleaned image lists."""

from __future__ import annotations

import json
from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vp.output.console import ConsoleProtocol

__all__ = ["OutputFormat", "print_channel_images"]


class OutputFormat(str, Enum):
    LIST = "list"
    JSON = "json"


def print_channel_images(
    images: Sequence[str],
    console: ConsoleProtocol,
    *,
    output: OutputFormat = OutputFormat.LIST,
) -> None:
    """Write images one per line, or as a JSON array."""
    if output is OutputFormat.JSON:
        console.echo(json.dumps(list(images), indent=2))
        return
    for image in images:
        console.echo(image)
