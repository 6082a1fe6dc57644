"""Console output abstraction.

Commands write data (image references) and diagnostics (errors, hints,
verbose details) through ``ConsoleProtocol``. The Rich implementation keeps
the two apart: data goes to stdout verbatim, diagnostics go to stderr, so
``vp release image ls ... > images.txt`` captures only images.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    ERROR = auto()
    WARNING = auto()
    DIM = auto()  # hints, verbose details

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def echo(self, message: str) -> None:
        """Write a data line verbatim (no markup, no highlighting)."""
        ...

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a diagnostic message with optional styling."""
        ...

    def error(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...


class RichConsole:
    """Console implementation using Rich."""

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._out = Console(markup=False, highlight=False, soft_wrap=True)
        self._err = Console(stderr=True)
        self._style_map = {
            Style.DEFAULT: "",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.DIM: "dim",
        }

    def echo(self, message: str) -> None:
        self._out.print(message)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._err.print(message, style=rich_style, markup=False, highlight=False)
        else:
            self._err.print(message, markup=False, highlight=False)

    def _labelled(self, label: str, style: str, message: str) -> None:
        from rich.text import Text

        self._err.print(Text.assemble((label, style), " ", message))

    def error(self, message: str) -> None:
        self._labelled("error:", "red bold", message)

    def warning(self, message: str) -> None:
        self._labelled("warning:", "yellow", message)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style
    data: bool = False


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def echo(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.DEFAULT, data=True))

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    # Test helpers

    @property
    def data(self) -> list[str]:
        """Lines written with echo(), i.e. what would reach stdout."""
        return [o.message for o in self.outputs if o.data]

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def has_warning(self) -> bool:
        return any(o.style == Style.WARNING for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        return [o for o in self.outputs if substring in o.message]
