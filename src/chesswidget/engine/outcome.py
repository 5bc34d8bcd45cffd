"""Outcome — success-or-typed-failure result of a rules-engine call."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

import chess

from chesswidget.core.errors import RulesViolation

T = TypeVar("T")

# Everything python-chess raises for a bad position or move request.
ENGINE_ERRORS: tuple[type[Exception], ...] = (
    chess.IllegalMoveError,
    chess.InvalidMoveError,
    chess.AmbiguousMoveError,
    ValueError,
    IndexError,
    KeyError,
    AssertionError,
)


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Either a value or the ``RulesViolation`` that prevented it."""

    value: T | None = None
    error: RulesViolation | None = None

    @classmethod
    def ok(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failed(cls, error: RulesViolation) -> Outcome[T]:
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the stored violation."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def or_default(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]


def attempt(operation: str, fn: Callable[[], T]) -> Outcome[T]:
    """Run *fn*, capturing engine errors as a failed outcome."""
    try:
        return Outcome.ok(fn())
    except RulesViolation as exc:
        return Outcome.failed(exc)
    except ENGINE_ERRORS as exc:
        violation = RulesViolation(f"{operation}: {exc}", operation=operation)
        violation.__cause__ = exc
        return Outcome.failed(violation)
