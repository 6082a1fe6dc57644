"""Result type for explicit error handling.

API calls and release lookups return ``Result`` values instead of raising,
so every command has to decide what to do with a failure before it can
print anything.

Usage:
    match select_release(releases, "1.2.0"):
        case Ok(release):
            print(release.semver)
        case Err(error):
            print(error.message)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result."""

    value: T

    def map_err[F](self, f: Callable[[object], F]) -> Ok[T]:
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result."""

    error: E

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply ``f`` to the contained error, e.g. to wrap an ApiError."""
        return Err(f(self.error))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
