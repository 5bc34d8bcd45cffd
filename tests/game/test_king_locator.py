"""Tests for KingLocator."""

import chess
import pytest

from chesswidget.core.enums import Color, ValidationMode
from chesswidget.core.errors import RulesViolation
from chesswidget.engine.adapter import RulesEngineAdapter
from chesswidget.game.king_locator import KingLocator


class _ExplodingBoard(chess.Board):
    def piece_at(self, square: chess.Square) -> chess.Piece | None:
        raise ValueError("engine lookup failed")


def _broken_adapter(mode: ValidationMode) -> RulesEngineAdapter:
    adapter = RulesEngineAdapter(mode)
    adapter._board = _ExplodingBoard()
    return adapter


class TestFind:
    def test_starting_kings(self) -> None:
        locator = KingLocator(RulesEngineAdapter(ValidationMode.STRICT))
        assert locator.find(Color.WHITE) == "e1"
        assert locator.find(Color.BLACK) == "e8"

    def test_missing_king_is_none(self) -> None:
        adapter = RulesEngineAdapter(
            ValidationMode.PERMISSIVE, "8/8/8/8/8/8/8/4K3 w - - 0 1"
        )
        assert KingLocator(adapter).find(Color.BLACK) is None

    def test_strict_lookup_failure_propagates(self) -> None:
        locator = KingLocator(_broken_adapter(ValidationMode.STRICT))
        with pytest.raises(RulesViolation):
            locator.find(Color.WHITE)

    def test_permissive_lookup_failure_is_not_found(self) -> None:
        locator = KingLocator(_broken_adapter(ValidationMode.PERMISSIVE))
        assert locator.find(Color.WHITE) is None
