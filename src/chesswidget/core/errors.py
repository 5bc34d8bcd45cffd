"""Exceptions raised by the board core."""

from __future__ import annotations


class RulesViolation(ValueError):
    """The rules engine rejected a request.

    Raised when a position is malformed or illegal, or when a requested move
    is not legal in the current position.  ``operation`` names the adapter
    call that failed.
    """

    def __init__(self, message: str, *, operation: str = "") -> None:
        super().__init__(message)
        self.operation = operation
