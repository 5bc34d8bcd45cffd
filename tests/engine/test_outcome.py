"""Tests for Outcome and attempt()."""

import chess
import pytest

from chesswidget.core.errors import RulesViolation
from chesswidget.engine.outcome import Outcome, attempt


def test_attempt_success() -> None:
    outcome = attempt("op", lambda: 3)
    assert outcome.is_ok
    assert outcome.unwrap() == 3


def test_attempt_wraps_engine_error() -> None:
    def _illegal() -> None:
        raise chess.IllegalMoveError("no")

    outcome = attempt("apply_move", _illegal)
    assert not outcome.is_ok
    assert outcome.error is not None
    assert outcome.error.operation == "apply_move"
    assert isinstance(outcome.error.__cause__, chess.IllegalMoveError)
    with pytest.raises(RulesViolation):
        outcome.unwrap()


def test_attempt_passes_rules_violation_through() -> None:
    violation = RulesViolation("bad", operation="load")

    def _fail() -> None:
        raise violation

    assert attempt("load", _fail).error is violation


def test_attempt_does_not_swallow_unrelated_errors() -> None:
    def _bug() -> None:
        raise TypeError("programming error")

    with pytest.raises(TypeError):
        attempt("op", _bug)


def test_or_default() -> None:
    assert Outcome.ok(1).or_default(2) == 1
    assert Outcome.failed(RulesViolation("x")).or_default(2) == 2
