"""Tests for MoveRecord and GameStatus payloads."""

from chesswidget.core.enums import Color, PieceType
from chesswidget.core.move import MoveRecord
from chesswidget.core.status import GameStatus

FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


class TestSyntheticMove:
    def test_placeholder_fields(self) -> None:
        move = MoveRecord.synthetic_move("e2", "e5", None, FEN)
        assert move.synthetic
        assert move.san == "e2-e5"
        assert move.lan == "e2e5"
        assert move.flags == ""
        assert move.before == move.after == FEN

    def test_payload_includes_promotion_letter(self) -> None:
        move = MoveRecord.synthetic_move(
            "a7", "a8", PieceType.QUEEN, FEN, color=Color.BLACK
        )
        data = move.to_dict()
        assert data["from"] == "a7"
        assert data["to"] == "a8"
        assert data["promotion"] == "q"
        assert data["color"] == "b"
        assert "captured" not in data


class TestGameStatus:
    def test_default_is_all_false(self) -> None:
        status = GameStatus.default()
        data = status.to_dict()
        assert data.pop("fen") == ""
        assert not any(data.values())

    def test_in_promotion_added_on_request(self) -> None:
        data = GameStatus(is_check=True, fen="x").to_dict(in_promotion=True)
        assert data["in_promotion"] is True
        assert data["is_check"] is True
        assert "in_promotion" not in GameStatus().to_dict()
