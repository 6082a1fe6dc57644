"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .images import OutputFormat, print_channel_images

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputFormat",
    "RichConsole",
    "Style",
    "print_channel_images",
]
