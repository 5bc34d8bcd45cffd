"""Tests for RulesEngineAdapter in both validation modes."""

import chess
import pytest

from chesswidget.core.board import Board
from chesswidget.core.enums import Color, PieceType, ValidationMode
from chesswidget.core.errors import RulesViolation
from chesswidget.core.piece import Piece
from chesswidget.core.status import GameStatus
from chesswidget.engine.adapter import RulesEngineAdapter
from chesswidget.engine.outcome import Outcome

STRICT = ValidationMode.STRICT
PERMISSIVE = ValidationMode.PERMISSIVE

NO_BLACK_KING = "8/8/8/8/8/8/8/4K3 w - - 0 1"


def _play(adapter: RulesEngineAdapter, *moves: str) -> None:
    for uci in moves:
        adapter.apply_move(uci[:2], uci[2:4])


class TestLoad:
    def test_default_is_starting_position(self) -> None:
        adapter = RulesEngineAdapter(STRICT)
        assert adapter.current_board() == Board.from_chess(chess.Board())
        assert adapter.turn() == Color.WHITE

    def test_strict_rejects_missing_king(self) -> None:
        adapter = RulesEngineAdapter(STRICT)
        with pytest.raises(RulesViolation) as info:
            adapter.load(NO_BLACK_KING)
        assert info.value.operation == "load"
        # Engine position untouched
        assert adapter.current_board().count() == 32

    def test_strict_rejects_malformed_fen(self) -> None:
        with pytest.raises(RulesViolation) as info:
            RulesEngineAdapter(STRICT, "definitely not a fen")
        assert isinstance(info.value.__cause__, ValueError)

    def test_permissive_keeps_raw_placement(self) -> None:
        adapter = RulesEngineAdapter(PERMISSIVE)
        board = adapter.load(NO_BLACK_KING)
        assert board == Board.from_placement(NO_BLACK_KING)
        assert board["e1"] == Piece(Color.WHITE, PieceType.KING)

    def test_permissive_malformed_fen_gives_empty_board(self) -> None:
        adapter = RulesEngineAdapter(PERMISSIVE, "definitely not a fen")
        assert adapter.current_board() == Board.empty()

    def test_load_sets_turn(self) -> None:
        adapter = RulesEngineAdapter(
            STRICT, "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert adapter.turn() == Color.BLACK

    def test_reset(self) -> None:
        adapter = RulesEngineAdapter(PERMISSIVE, NO_BLACK_KING)
        board = adapter.reset()
        assert board.count() == 32
        assert adapter.turn() == Color.WHITE


class TestApplyMove:
    def test_double_pawn_push(self) -> None:
        adapter = RulesEngineAdapter(STRICT)
        move = adapter.apply_move("e2", "e4")
        assert move.san == "e4"
        assert move.lan == "e2e4"
        assert move.flags == "b"
        assert move.piece == PieceType.PAWN
        assert move.color == Color.WHITE
        assert move.before == chess.STARTING_FEN
        assert move.after.startswith("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b")
        assert not move.synthetic
        assert adapter.turn() == Color.BLACK

    def test_capture_flags(self) -> None:
        adapter = RulesEngineAdapter(STRICT)
        _play(adapter, "e2e4", "d7d5")
        move = adapter.apply_move("e4", "d5")
        assert move.flags == "c"
        assert move.captured == PieceType.PAWN
        assert move.san == "exd5"

    def test_en_passant_flags(self) -> None:
        adapter = RulesEngineAdapter(STRICT)
        _play(adapter, "e2e4", "a7a6", "e4e5", "d7d5")
        move = adapter.apply_move("e5", "d6")
        assert move.flags == "e"
        assert move.captured == PieceType.PAWN

    def test_castling_flags(self) -> None:
        adapter = RulesEngineAdapter(STRICT, "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        move = adapter.apply_move("e1", "g1")
        assert move.flags == "k"
        assert move.san == "O-O"
        move = adapter.apply_move("e8", "c8")
        assert move.flags == "q"

    def test_promotion_capture(self) -> None:
        adapter = RulesEngineAdapter(STRICT, "1r2k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        move = adapter.apply_move("a7", "b8", PieceType.KNIGHT)
        assert move.flags == "cp"
        assert move.promotion == PieceType.KNIGHT
        assert move.to_dict()["promotion"] == "n"
        assert adapter.piece_at("b8") == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_strict_illegal_move_raises_and_keeps_position(self) -> None:
        adapter = RulesEngineAdapter(STRICT)
        before = adapter.current_board()
        with pytest.raises(RulesViolation):
            adapter.apply_move("e2", "e5")
        assert adapter.current_board() == before
        assert adapter.turn() == Color.WHITE

    def test_strict_bad_square_raises(self) -> None:
        with pytest.raises(RulesViolation):
            RulesEngineAdapter(STRICT).apply_move("z9", "e4")

    def test_permissive_illegal_move_is_synthetic(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        adapter = RulesEngineAdapter(PERMISSIVE)
        before = adapter.current_board()
        with caplog.at_level("WARNING", logger="chesswidget.engine.adapter"):
            move = adapter.apply_move("e2", "e5")
        assert move.synthetic
        assert move.san == "e2-e5"
        assert move.before == move.after == chess.STARTING_FEN
        # Engine board is not mutated by the fallback
        assert adapter.current_board() == before
        assert "desync" in caplog.text.lower()

    def test_permissive_move_from_empty_square(self) -> None:
        move = RulesEngineAdapter(PERMISSIVE).apply_move("e4", "e5")
        assert move.synthetic


class TestQueries:
    def test_legal_moves_from_pawn(self) -> None:
        adapter = RulesEngineAdapter(STRICT)
        assert sorted(adapter.legal_moves_from("e2")) == ["e3", "e4"]
        assert adapter.legal_moves_from("e4") == []

    def test_legal_moves_castling_maps_to_king_destination(self) -> None:
        adapter = RulesEngineAdapter(STRICT, "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        targets = adapter.legal_moves_from("e1")
        assert "g1" in targets
        assert "c1" in targets

    def test_legal_moves_promotion_deduplicated(self) -> None:
        adapter = RulesEngineAdapter(STRICT, "2k5/P7/8/8/8/8/8/K7 w - - 0 1")
        assert adapter.legal_moves_from("a7") == ["a8"]

    def test_piece_at(self) -> None:
        adapter = RulesEngineAdapter(STRICT)
        assert adapter.piece_at("g8") == Piece(Color.BLACK, PieceType.KNIGHT)
        assert adapter.piece_at("e4") is None

    def test_piece_at_bad_square(self) -> None:
        with pytest.raises(RulesViolation):
            RulesEngineAdapter(STRICT).piece_at("x0")
        assert RulesEngineAdapter(PERMISSIVE).piece_at("x0") is None

    def test_permissive_legal_moves_bad_square(self) -> None:
        assert RulesEngineAdapter(PERMISSIVE).legal_moves_from("x0") == []

    def test_status_checkmate(self) -> None:
        adapter = RulesEngineAdapter(STRICT)
        _play(adapter, "f2f3", "e7e5", "g2g4", "d8h4")
        status = adapter.status()
        assert adapter.is_checkmate()
        assert status.is_check
        assert status.is_checkmate
        assert status.is_game_over
        assert not status.is_draw
        assert status.fen == adapter.fen()

    def test_status_stalemate_is_draw(self) -> None:
        adapter = RulesEngineAdapter(STRICT, "7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")
        status = adapter.status()
        assert status.is_stalemate
        assert status.is_draw
        assert status.is_game_over

    def test_status_insufficient_material(self) -> None:
        status = RulesEngineAdapter(STRICT, "8/8/8/4k3/8/8/8/4K3 w - - 0 1").status()
        assert status.is_insufficient_material
        assert status.is_draw


class TestUndo:
    def test_undo_restores_position(self) -> None:
        adapter = RulesEngineAdapter(STRICT)
        start = adapter.current_board()
        adapter.apply_move("g1", "f3")
        record = adapter.undo()
        assert record is not None
        assert record.san == "Nf3"
        assert record.before == chess.STARTING_FEN
        assert adapter.current_board() == start
        assert adapter.turn() == Color.WHITE

    def test_undo_empty_history(self) -> None:
        assert RulesEngineAdapter(STRICT).undo() is None

    def test_permissive_undo_after_synthetic_move(self) -> None:
        adapter = RulesEngineAdapter(PERMISSIVE)
        adapter.apply_move("e2", "e4")
        adapter.apply_move("e4", "e6")  # rejected: not black's piece to move
        record = adapter.undo()
        assert record is not None
        assert record.lan == "e2e4"
        assert adapter.undo() is None


class TestSettle:
    def test_strict_reraises(self) -> None:
        adapter = RulesEngineAdapter(STRICT)
        with pytest.raises(RulesViolation):
            adapter._settle(Outcome.failed(RulesViolation("boom")), lambda: 1)

    def test_permissive_uses_fallback(self) -> None:
        adapter = RulesEngineAdapter(PERMISSIVE)
        assert adapter._settle(Outcome.failed(RulesViolation("boom")), lambda: 1) == 1

    def test_success_passes_through(self) -> None:
        for mode in (STRICT, PERMISSIVE):
            adapter = RulesEngineAdapter(mode)
            assert adapter._settle(Outcome.ok(5), lambda: 1) == 5

    def test_permissive_status_fallback_is_default(self) -> None:
        class _Exploding(chess.Board):
            def is_checkmate(self) -> bool:
                raise ValueError("corrupt engine state")

        adapter = RulesEngineAdapter(PERMISSIVE)
        adapter._board = _Exploding()
        assert adapter.status() == GameStatus.default()
        assert adapter.is_checkmate() is False
